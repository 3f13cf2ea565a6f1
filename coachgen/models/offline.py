"""
Offline content category model.
"""

from enum import Enum


class Category(str, Enum):
    """Coarse program category used to pick an offline template."""

    SPRINTS = "sprints"
    MIDDLE_DISTANCE = "middle_distance"
    LONG_DISTANCE = "long_distance"
    GENERAL = "general"
