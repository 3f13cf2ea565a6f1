"""
API Routes module.

Contains all API endpoint routers.
"""

from coachgen.api.routes import generate, health

__all__ = ["health", "generate"]
