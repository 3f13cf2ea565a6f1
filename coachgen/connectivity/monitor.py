"""
Connectivity monitor.

Aggregates three passive watchers (primary, secondary, any interface)
into a ConnectivityState, and exposes the active probe for callers that
need to confirm an offline reading.

Sandi Metz Principles:
- Single Responsibility: Answer "can we reach the network"
- Dependency Injection: Source and probe injected
- Explicit lifecycle: start() / stop(), async context manager
"""

import threading
from typing import Callable, Dict, List, Optional

from coachgen.config import config
from coachgen.connectivity.interfaces import InterfaceSource, SysfsInterfaceSource
from coachgen.connectivity.probe import ReachabilityProbe
from coachgen.connectivity.watcher import InterfaceWatcher
from coachgen.models.connectivity import ConnectivityState, InterfaceClass, PathStatus
from coachgen.utils.logger import get_logger, log_connectivity_change

logger = get_logger(__name__)

ConnectivityListener = Callable[[ConnectivityState], None]


class ConnectivityMonitor:
    """
    Passive + active connectivity checks.

    State is replaced atomically on every watcher transition and can be
    read from any caller.
    """

    def __init__(
        self,
        source: Optional[InterfaceSource] = None,
        probe: Optional[ReachabilityProbe] = None,
        poll_interval: Optional[float] = None,
    ):
        """
        Initialize monitor.

        Args:
            source: Interface status source (sysfs if None)
            probe: Active probe (config endpoints if None)
            poll_interval: Watcher poll interval in seconds
        """
        self._source = source or SysfsInterfaceSource()
        self._probe = probe or ReachabilityProbe()
        interval = poll_interval or config.monitor_poll_interval_seconds
        self._state = ConnectivityState()
        self._lock = threading.Lock()
        self._listeners: List[ConnectivityListener] = []
        self._watchers: Dict[InterfaceClass, InterfaceWatcher] = {
            interface_class: InterfaceWatcher(
                interface_class, self._source, self._on_status, interval=interval
            )
            for interface_class in InterfaceClass
        }

    @property
    def state(self) -> ConnectivityState:
        """Current passive state."""
        return self._state

    @property
    def is_online(self) -> bool:
        """Passive online flag."""
        return self._state.online

    @property
    def running(self) -> bool:
        return any(w.running for w in self._watchers.values())

    def add_listener(self, listener: ConnectivityListener) -> None:
        """Register a callback fired on every state change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ConnectivityListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def start(self) -> None:
        """Start the passive watchers. Idempotent."""
        if self.running:
            return
        for watcher in self._watchers.values():
            watcher.start()
        logger.info("Connectivity monitoring started")

    async def stop(self) -> None:
        """Stop and await all watchers."""
        for watcher in self._watchers.values():
            await watcher.stop()
        logger.info("Connectivity monitoring stopped")

    def refresh(self) -> ConnectivityState:
        """
        Poll every watcher once, synchronously.

        Returns:
            Updated state
        """
        for watcher in self._watchers.values():
            watcher.poll_once()
        return self._state

    async def probe(self) -> bool:
        """
        Actively check reachability.

        Returns:
            True if any probe endpoint answered 2xx
        """
        return await self._probe.probe()

    async def __aenter__(self) -> "ConnectivityMonitor":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    def _on_status(self, interface_class: InterfaceClass, status: PathStatus) -> None:
        satisfied = status == PathStatus.SATISFIED
        with self._lock:
            previous = self._state
            if interface_class == InterfaceClass.PRIMARY:
                update = {"has_primary_interface": satisfied}
            elif interface_class == InterfaceClass.SECONDARY:
                update = {"has_secondary_interface": satisfied}
            else:
                update = {"aggregate_path_status": status}
            self._state = previous.model_copy(update=update)
            state = self._state

        if state == previous:
            return

        log_connectivity_change(
            state.online,
            primary=state.has_primary_interface,
            secondary=state.has_secondary_interface,
            path_status=state.aggregate_path_status.value,
        )
        for listener in list(self._listeners):
            listener(state)
