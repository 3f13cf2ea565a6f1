"""
Retry logic for chat completion dispatch.

Sandi Metz Principles:
- Single Responsibility: Manage retry logic
- Small methods: Each method < 10 lines
- Dependency Injection: Configuration and sleep injected
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from coachgen.exceptions import GenerationError
from coachgen.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class RetryConfig:
    """Retry configuration."""

    max_attempts: int = 3
    delay: float = 1.0


class RetryHandler:
    """
    Fixed-delay retry handler.

    Retries GenerationErrors flagged retryable; anything else propagates
    on the first occurrence. The last retryable error is re-raised once
    attempts are exhausted.
    """

    def __init__(
        self,
        config: Optional[RetryConfig] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize retry handler.

        Args:
            config: Retry configuration (uses defaults if None)
            sleep: Async sleep used between attempts
        """
        self._config = config or RetryConfig()
        self._sleep = sleep

    @property
    def max_attempts(self) -> int:
        return self._config.max_attempts

    async def execute(self, func: Callable[[int], Awaitable[T]]) -> T:
        """
        Execute function with retry logic.

        Args:
            func: Async function taking the 0-indexed attempt number

        Returns:
            Function result

        Raises:
            GenerationError: Fatal error, or last retryable error
        """
        attempt = 0
        while True:
            try:
                return await func(attempt)
            except GenerationError as e:
                if not e.retryable:
                    raise
                attempt += 1
                if attempt >= self._config.max_attempts:
                    logger.error(f"All {attempt} attempts failed", error=str(e))
                    raise

                logger.warning(
                    f"Attempt {attempt} failed, retrying in {self._config.delay:.2f}s",
                    error=str(e),
                )
                await self._sleep(self._config.delay)
