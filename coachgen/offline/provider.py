"""
Offline template provider.

Sandi Metz Principles:
- Single Responsibility: Map prompts to static fallback content
- Small methods: Classification rules kept as data
- Dependency Injection: Template table injectable
"""

from typing import Dict, Optional, Sequence, Tuple

from coachgen.models.offline import Category
from coachgen.offline.templates import TEMPLATES
from coachgen.utils.logger import get_logger

logger = get_logger(__name__)

# Evaluated in order; first match wins.
CLASSIFICATION_RULES: Sequence[Tuple[Category, Tuple[str, ...]]] = (
    (Category.SPRINTS, ("sprint",)),
    (Category.MIDDLE_DISTANCE, ("middle", "800", "1500")),
    (Category.LONG_DISTANCE, ("long", "5000", "10000")),
)


class OfflineTemplateProvider:
    """
    Supplies deterministic substitute content with no network dependency.
    """

    def __init__(self, templates: Optional[Dict[Category, str]] = None):
        """
        Initialize provider.

        Args:
            templates: Template table (built-in table if None). Must hold
                a non-empty GENERAL entry.
        """
        self._templates = dict(templates if templates is not None else TEMPLATES)
        if not self._templates.get(Category.GENERAL, "").strip():
            raise ValueError("Offline templates require a non-empty GENERAL entry")

    @staticmethod
    def classify(prompt: str) -> Category:
        """
        Classify prompt by ordered keyword scan.

        Args:
            prompt: Prompt text

        Returns:
            First matching category, GENERAL if none match
        """
        text = prompt.lower()
        for category, keywords in CLASSIFICATION_RULES:
            if any(keyword in text for keyword in keywords):
                return category
        return Category.GENERAL

    def template(self, category: Category) -> str:
        """
        Get template for category.

        Args:
            category: Program category

        Returns:
            Template text, GENERAL template if category has none
        """
        text = self._templates.get(category)
        if not text:
            return self._templates[Category.GENERAL]
        return text

    def template_for(self, prompt: str) -> str:
        """Get the template selected by classifying prompt."""
        category = self.classify(prompt)
        logger.info("Using offline template", category=category.value)
        return self.template(category)
