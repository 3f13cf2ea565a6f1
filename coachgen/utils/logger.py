"""
Structured logging configuration.

Following Sandi Metz principles:
- Single Responsibility: Logging setup and configuration
- Small functions: Each setup step isolated
- Clear naming: Descriptive function names
"""

import logging
import sys
from typing import Any

import structlog


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structured logger
    """
    return structlog.get_logger(name)


def log_cache_hit(prompt: str, **kwargs: Any) -> None:
    """
    Log cache hit.

    Args:
        prompt: Prompt text
        **kwargs: Additional context
    """
    logger = get_logger("cache")
    logger.info("cache_hit", prompt=prompt[:100], **kwargs)


def log_cache_miss(prompt: str, **kwargs: Any) -> None:
    """
    Log cache miss.

    Args:
        prompt: Prompt text
        **kwargs: Additional context
    """
    logger = get_logger("cache")
    logger.info("cache_miss", prompt=prompt[:100], **kwargs)


def log_llm_call(model: str, attempt: int, status: str, **kwargs: Any) -> None:
    """
    Log a chat completion attempt.

    Args:
        model: Model name
        attempt: Attempt number (1-indexed)
        status: Outcome (success, retryable, fatal)
        **kwargs: Additional context
    """
    logger = get_logger("llm")
    logger.info("llm_call", model=model, attempt=attempt, status=status, **kwargs)


def log_connectivity_change(online: bool, **kwargs: Any) -> None:
    """
    Log a passive connectivity transition.

    Args:
        online: Aggregated online flag
        **kwargs: Additional context (interface flags, path status)
    """
    logger = get_logger("connectivity")
    logger.info("connectivity_changed", online=online, **kwargs)


def log_error(error: Exception, context: str, **kwargs: Any) -> None:
    """
    Log error with context.

    Args:
        error: Exception that occurred
        context: Error context
        **kwargs: Additional context
    """
    logger = get_logger("error")
    logger.error(
        "error_occurred",
        error=str(error),
        error_type=type(error).__name__,
        context=context,
        **kwargs
    )
