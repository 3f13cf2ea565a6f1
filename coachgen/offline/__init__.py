"""
Offline fallback content.
"""

from coachgen.offline.provider import OfflineTemplateProvider

__all__ = ["OfflineTemplateProvider"]
