"""
Per-call progress reporting.

Sandi Metz Principles:
- Single Responsibility: Publish a bounded, non-decreasing progress value
- Small methods: Tick, set, complete
- Scoped resources: Ticker lives inside an async context manager
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, List, Optional

from coachgen.config import config
from coachgen.utils.logger import get_logger

logger = get_logger(__name__)

ProgressListener = Callable[[float], None]


class ProgressTracker:
    """
    Progress of one generation call.

    The value only moves forward, stays within [0, 1], and ends at 1.0
    once complete() is called. Listeners receive every published value.
    """

    def __init__(
        self,
        step: Optional[float] = None,
        interval: Optional[float] = None,
        cap: Optional[float] = None,
    ):
        """
        Initialize tracker.

        Args:
            step: Increment per tick
            interval: Seconds between ticks
            cap: Highest value reachable by ticking
        """
        self._step = step if step is not None else config.progress_step
        self._interval = interval if interval is not None else config.progress_interval_seconds
        self._cap = cap if cap is not None else config.progress_cap
        self._value = 0.0
        self._finished = False
        self._listeners: List[ProgressListener] = []

    @property
    def value(self) -> float:
        return self._value

    @property
    def finished(self) -> bool:
        return self._finished

    def add_listener(self, listener: ProgressListener) -> None:
        """Register a callback receiving each new value."""
        self._listeners.append(listener)

    def set(self, value: float) -> None:
        """
        Publish a value, ignoring moves backwards.

        Args:
            value: Requested progress, clamped to [0, 1]
        """
        if self._finished:
            return
        clamped = min(max(value, 0.0), 1.0)
        if clamped <= self._value:
            return
        self._value = clamped
        self._publish()

    def tick(self) -> None:
        """Advance by one step, never past the cap."""
        if self._value >= self._cap:
            return
        self.set(min(self._value + self._step, self._cap))

    def complete(self) -> None:
        """Force progress to 1.0. Idempotent."""
        if self._finished:
            return
        self._value = 1.0
        self._finished = True
        self._publish()

    @asynccontextmanager
    async def ticking(self) -> AsyncIterator["ProgressTracker"]:
        """
        Tick in the background for the duration of the block.

        The ticker is cancelled and progress completed on any exit,
        including cancellation of the enclosing task.
        """
        task = asyncio.create_task(self._tick_loop(), name="progress-ticker")
        try:
            yield self
        finally:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
            self.complete()

    async def _tick_loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self.tick()

    def _publish(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._value)
            except Exception as e:
                logger.error("Progress listener failed", error=str(e))
