"""
Connectivity monitoring module.

Contains:
- Interface status sources
- Passive interface watchers
- Active reachability probe
- Connectivity monitor
"""

from coachgen.connectivity.interfaces import (
    InterfaceSource,
    StaticInterfaceSource,
    SysfsInterfaceSource,
)
from coachgen.connectivity.monitor import ConnectivityMonitor
from coachgen.connectivity.probe import ReachabilityProbe
from coachgen.connectivity.watcher import InterfaceWatcher

__all__ = [
    "ConnectivityMonitor",
    "InterfaceSource",
    "InterfaceWatcher",
    "ReachabilityProbe",
    "StaticInterfaceSource",
    "SysfsInterfaceSource",
]
