"""
CoachGen: resilient training content generation client.
"""

__version__ = "0.1.0"
