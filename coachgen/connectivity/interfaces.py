"""
Passive interface status sources.

Sandi Metz Principles:
- Single Responsibility: Read interface state from the OS
- Interface Segregation: One-method source protocol
"""

from pathlib import Path
from typing import Dict, Iterable, Protocol, Tuple

from coachgen.models.connectivity import InterfaceClass, PathStatus

CELLULAR_PREFIXES = ("wwan", "rmnet", "ccmni", "ppp")
IGNORED_INTERFACES = ("lo",)


class InterfaceSource(Protocol):
    """Reports the current status of an interface class."""

    def status(self, interface_class: InterfaceClass) -> PathStatus:
        ...


class StaticInterfaceSource:
    """
    Source with fixed, settable statuses.

    Used where no OS view exists (tests, embedded callers that push
    state themselves).
    """

    def __init__(self, statuses: Dict[InterfaceClass, PathStatus] | None = None):
        self._statuses = dict(statuses or {})

    def set(self, interface_class: InterfaceClass, status: PathStatus) -> None:
        """Override status for an interface class."""
        self._statuses[interface_class] = status

    def status(self, interface_class: InterfaceClass) -> PathStatus:
        return self._statuses.get(interface_class, PathStatus.UNSATISFIED)


class SysfsInterfaceSource:
    """
    Linux source reading /sys/class/net.

    Cellular-class interfaces are recognized by name prefix; every other
    non-loopback interface (wireless or wired) counts as primary.
    A class is SATISFIED when one of its interfaces has operstate "up",
    REQUIRES_CONNECTION when it has interfaces but none is up, and
    UNSATISFIED when it has none.
    """

    def __init__(self, root: Path = Path("/sys/class/net")):
        self._root = root

    def status(self, interface_class: InterfaceClass) -> PathStatus:
        states = [
            is_up
            for name, is_up in self._interfaces()
            if self._matches(name, interface_class)
        ]
        if any(states):
            return PathStatus.SATISFIED
        if states:
            return PathStatus.REQUIRES_CONNECTION
        return PathStatus.UNSATISFIED

    def _interfaces(self) -> Iterable[Tuple[str, bool]]:
        try:
            entries = sorted(self._root.iterdir())
        except OSError:
            return []
        return [
            (entry.name, self._read_operstate(entry) == "up")
            for entry in entries
            if entry.name not in IGNORED_INTERFACES
        ]

    @staticmethod
    def _read_operstate(entry: Path) -> str:
        try:
            return (entry / "operstate").read_text().strip().lower()
        except OSError:
            return "unknown"

    @staticmethod
    def _matches(name: str, interface_class: InterfaceClass) -> bool:
        cellular = name.startswith(CELLULAR_PREFIXES)
        if interface_class == InterfaceClass.SECONDARY:
            return cellular
        if interface_class == InterfaceClass.PRIMARY:
            return not cellular
        return True
