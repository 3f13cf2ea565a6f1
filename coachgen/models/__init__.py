"""
Models package for CoachGen.

Exports all model classes for easy imports throughout the application.
"""

# Cache models
from coachgen.models.cache_entry import CacheEntry, CacheStats

# Connectivity models
from coachgen.models.connectivity import ConnectivityState, InterfaceClass, PathStatus

# Document models
from coachgen.models.document import (
    ContentSource,
    GenerationResult,
    Section,
    SectionKind,
    StructuredDocument,
)

# LLM models
from coachgen.models.llm import ChatCompletionRequest, ChatMessage, LLMResponse

# Offline models
from coachgen.models.offline import Category

# Prompt models
from coachgen.models.prompt import PromptMetadata

# API models
from coachgen.models.response import GenerateRequest, GenerateResponse, HealthResponse

__all__ = [
    # Cache
    "CacheEntry",
    "CacheStats",
    # Connectivity
    "ConnectivityState",
    "InterfaceClass",
    "PathStatus",
    # Document
    "Section",
    "SectionKind",
    "StructuredDocument",
    "ContentSource",
    "GenerationResult",
    # LLM
    "ChatCompletionRequest",
    "ChatMessage",
    "LLMResponse",
    # Offline
    "Category",
    # Prompt
    "PromptMetadata",
    # API
    "GenerateRequest",
    "GenerateResponse",
    "HealthResponse",
]
