"""
LLM access: request building, dispatch, retry and response decoding.
"""

from coachgen.llm.openai_provider import OpenAIProvider
from coachgen.llm.provider import BaseLLMProvider
from coachgen.llm.request_builder import LLMRequestBuilder
from coachgen.llm.response_parser import LLMResponseParser
from coachgen.llm.retry import RetryConfig, RetryHandler
from coachgen.llm.timeout_handler import TimeoutConfig, TimeoutHandler

__all__ = [
    "BaseLLMProvider",
    "LLMRequestBuilder",
    "LLMResponseParser",
    "OpenAIProvider",
    "RetryConfig",
    "RetryHandler",
    "TimeoutConfig",
    "TimeoutHandler",
]
