"""
LLM timeout handler.

Sandi Metz Principles:
- Single Responsibility: Handle request timeouts
- Small methods: Each method < 10 lines
- Clear naming: Self-documenting code
"""

import asyncio
from typing import Awaitable, Callable, TypeVar

from coachgen.exceptions import NetworkError
from coachgen.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TimeoutConfig:
    """Configuration for timeout handling."""

    def __init__(self, timeout_seconds: float = 60.0):
        """
        Initialize timeout configuration.

        Args:
            timeout_seconds: Overall timeout in seconds (default: 60)
        """
        self.timeout_seconds = timeout_seconds


class TimeoutHandler:
    """
    Bounds the total time spent on one request attempt.

    A timeout surfaces as a retryable NetworkError marked timed_out.
    """

    def __init__(self, config: TimeoutConfig | None = None):
        """
        Initialize timeout handler.

        Args:
            config: Timeout configuration (creates default if None)
        """
        self._config = config or TimeoutConfig()

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Execute operation with timeout.

        Args:
            operation: Async function to execute

        Returns:
            Operation result

        Raises:
            NetworkError: If operation times out
        """
        timeout = self._config.timeout_seconds

        try:
            return await asyncio.wait_for(operation(), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.error("Request timeout", timeout=timeout)
            raise NetworkError.timeout() from e

    def get_timeout(self) -> float:
        """
        Get configured timeout value.

        Returns:
            Timeout in seconds
        """
        return self._config.timeout_seconds
