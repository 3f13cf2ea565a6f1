"""Test LLM, cache and API models."""

import pytest
from pydantic import ValidationError

from coachgen.models.cache_entry import CacheEntry, CacheStats
from coachgen.models.llm import ChatCompletionRequest, ChatMessage, LLMResponse
from coachgen.models.response import GenerateRequest


class TestChatCompletionRequest:
    """Test ChatCompletionRequest model."""

    def test_payload_shape(self):
        """Test wire payload fields."""
        request = ChatCompletionRequest(
            model="gpt-3.5-turbo",
            messages=[ChatMessage(role="user", content="hi")],
        )

        assert request.to_payload() == {
            "model": "gpt-3.5-turbo",
            "messages": [{"role": "user", "content": "hi"}],
            "temperature": 0.7,
            "max_tokens": 1000,
            "presence_penalty": 0.0,
            "frequency_penalty": 0.0,
        }

    def test_requires_messages(self):
        """Test empty message list rejected."""
        with pytest.raises(ValidationError):
            ChatCompletionRequest(model="m", messages=[])

    def test_rejects_unknown_role(self):
        """Test role restricted to chat roles."""
        with pytest.raises(ValidationError):
            ChatMessage(role="tool", content="x")


class TestLLMResponse:
    """Test LLMResponse model."""

    def test_total_tokens(self):
        """Test total token calculation."""
        response = LLMResponse(content="x", prompt_tokens=10, completion_tokens=5)
        assert response.total_tokens == 15

    def test_rejects_empty_content(self):
        """Test empty content rejected."""
        with pytest.raises(ValidationError):
            LLMResponse(content="")


class TestCacheEntry:
    """Test CacheEntry model."""

    def test_expiry_boundary(self):
        """Test entry expires once age reaches max age."""
        entry = CacheEntry(prompt="p", response="r", created_at=100.0)

        assert not entry.is_expired(10.0, now=109.9)
        assert entry.is_expired(10.0, now=110.0)

    def test_increment_hit_count(self):
        """Test hit counter."""
        entry = CacheEntry(prompt="p", response="r")
        entry.increment_hit_count()
        entry.increment_hit_count()
        assert entry.hit_count == 2


class TestCacheStats:
    """Test CacheStats model."""

    def test_hit_rate(self):
        assert CacheStats(hits=3, misses=1).hit_rate == 0.75

    def test_hit_rate_without_lookups(self):
        assert CacheStats().hit_rate == 0.0


class TestGenerateRequest:
    """Test GenerateRequest model."""

    def test_rejects_empty_prompt(self):
        with pytest.raises(ValidationError):
            GenerateRequest(prompt="")
