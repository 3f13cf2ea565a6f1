"""
Connectivity state models.

Sandi Metz Principles:
- Single Responsibility: Network reachability snapshot
- Clear naming: Interface classes named by role
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PathStatus(str, Enum):
    """Interface-level path status."""

    SATISFIED = "satisfied"
    UNSATISFIED = "unsatisfied"
    REQUIRES_CONNECTION = "requires_connection"


class InterfaceClass(str, Enum):
    """Interface class watched by a passive watcher."""

    PRIMARY = "primary"  # Wi-Fi / wired
    SECONDARY = "secondary"  # cellular
    ANY = "any"


class ConnectivityState(BaseModel):
    """
    Passive connectivity snapshot.

    The online flag is derived from the interface flags only;
    aggregate_path_status is advisory.
    """

    model_config = ConfigDict(frozen=True)

    has_primary_interface: bool = Field(default=False, description="Wi-Fi/wired up")
    has_secondary_interface: bool = Field(default=False, description="Cellular up")
    aggregate_path_status: PathStatus = Field(
        default=PathStatus.REQUIRES_CONNECTION, description="Any-interface status"
    )

    @property
    def online(self) -> bool:
        """Check if any watched interface class is satisfied."""
        return self.has_primary_interface or self.has_secondary_interface
