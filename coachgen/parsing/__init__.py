"""
Raw text to structured document parsing.
"""

from coachgen.parsing.content_parser import ContentParser

__all__ = ["ContentParser"]
