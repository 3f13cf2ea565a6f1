"""
Services module.

Contains the generation orchestration services.
"""

from coachgen.services.generation_client import GenerationClient
from coachgen.services.progress import ProgressTracker

__all__ = ["GenerationClient", "ProgressTracker"]
