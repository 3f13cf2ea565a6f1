"""
API request and response models.

Sandi Metz Principles:
- Small classes with clear purpose
- Clear naming conventions
"""

from typing import Literal

from pydantic import BaseModel, Field

from coachgen.models.cache_entry import CacheStats
from coachgen.models.connectivity import ConnectivityState
from coachgen.models.document import ContentSource, StructuredDocument


class GenerateRequest(BaseModel):
    """Generation request body."""

    prompt: str = Field(..., min_length=1, max_length=10000, description="Prompt text")


class GenerateResponse(BaseModel):
    """Generation result."""

    document: StructuredDocument = Field(..., description="Parsed content")
    source: ContentSource = Field(..., description="cache, network or offline")
    offline: bool = Field(..., description="Served from an offline template")


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "degraded"] = Field(..., description="Service status")
    environment: str = Field(..., description="Environment name")
    version: str = Field(..., description="Application version")
    connectivity: ConnectivityState = Field(..., description="Passive connectivity")
    online: bool = Field(..., description="Passive online flag")
    provider_configured: bool = Field(..., description="API key present")
    cache: CacheStats = Field(..., description="Response cache counters")
