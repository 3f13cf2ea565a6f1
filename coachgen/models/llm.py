"""
LLM request and response models.

Sandi Metz Principles:
- Small classes focused on LLM interaction
- Clear separation of request and response
"""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """Single chat message."""

    role: Literal["system", "user", "assistant"] = Field(..., description="Role")
    content: str = Field(..., description="Message text")


class ChatCompletionRequest(BaseModel):
    """Chat completions request body."""

    model: str = Field(..., description="Model name")
    messages: List[ChatMessage] = Field(..., min_length=1, description="Messages")
    temperature: float = Field(default=0.7, description="Sampling temperature")
    max_tokens: int = Field(default=1000, ge=1, description="Max tokens")
    presence_penalty: float = Field(default=0.0, description="Presence penalty")
    frequency_penalty: float = Field(default=0.0, description="Frequency penalty")

    def to_payload(self) -> Dict[str, Any]:
        """Convert to wire payload."""
        return self.model_dump()


class LLMResponse(BaseModel):
    """LLM response model."""

    content: str = Field(..., min_length=1, description="Response content")
    model: str = Field(default="", description="Model used")
    prompt_tokens: int = Field(default=0, ge=0, description="Prompt tokens")
    completion_tokens: int = Field(default=0, ge=0, description="Completion tokens")

    @property
    def total_tokens(self) -> int:
        """Calculate total tokens."""
        return self.prompt_tokens + self.completion_tokens
