"""
Prompt metadata model.
"""

from pydantic import BaseModel, Field


class PromptMetadata(BaseModel):
    """Coarse facts pulled out of a free-text training prompt."""

    age_group: str = Field(default="Senior", description="Age group, e.g. U16")
    event: str = Field(default="General Training", description="Event or event family")
    week: str = Field(default="Week 1", description="Week label")
