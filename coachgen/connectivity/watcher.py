"""
Passive interface watcher.

Sandi Metz Principles:
- Single Responsibility: Poll one interface class, report transitions
- Dependency Injection: Source and callback injected
"""

import asyncio
from typing import Callable, Optional

from coachgen.connectivity.interfaces import InterfaceSource
from coachgen.models.connectivity import InterfaceClass, PathStatus
from coachgen.utils.logger import get_logger

logger = get_logger(__name__)

StatusCallback = Callable[[InterfaceClass, PathStatus], None]


class InterfaceWatcher:
    """
    Background task watching one interface class.

    The callback fires on the first reading and on every change after.
    """

    def __init__(
        self,
        interface_class: InterfaceClass,
        source: InterfaceSource,
        on_change: StatusCallback,
        interval: float = 2.0,
    ):
        """
        Initialize watcher.

        Args:
            interface_class: Class to watch
            source: Status source
            on_change: Called with (class, status) on transitions
            interval: Poll interval in seconds
        """
        self._class = interface_class
        self._source = source
        self._on_change = on_change
        self._interval = interval
        self._status: Optional[PathStatus] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def status(self) -> Optional[PathStatus]:
        """Last observed status, None before the first poll."""
        return self._status

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start polling in the background."""
        if self.running:
            return
        self._task = asyncio.create_task(
            self._run(), name=f"interface-watcher-{self._class.value}"
        )

    async def stop(self) -> None:
        """Cancel polling and wait for the task to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    def poll_once(self) -> PathStatus:
        """
        Read the source and report a transition if any.

        Returns:
            Current status
        """
        status = self._source.status(self._class)
        if status != self._status:
            self._status = status
            logger.debug(
                "Interface status changed",
                interface_class=self._class.value,
                status=status.value,
            )
            self._on_change(self._class, status)
        return status

    async def _run(self) -> None:
        while True:
            try:
                self.poll_once()
            except Exception as e:
                logger.error(
                    "Interface poll failed",
                    interface_class=self._class.value,
                    error=str(e),
                )
            await asyncio.sleep(self._interval)
