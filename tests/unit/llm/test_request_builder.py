"""Test LLM request builder."""

import pytest

from coachgen.exceptions import SerializationError
from coachgen.llm.request_builder import LLMRequestBuilder
from coachgen.models.llm import ChatCompletionRequest, ChatMessage


class TestLLMRequestBuilder:
    """Test LLMRequestBuilder class."""

    @pytest.fixture
    def builder(self, test_config) -> LLMRequestBuilder:
        return LLMRequestBuilder(test_config)

    def test_messages(self, builder):
        """Test system message precedes user prompt."""
        messages = builder.build_messages("U16 100m Sprints Week 3")

        assert [m.role for m in messages] == ["system", "user"]
        assert messages[1].content == "U16 100m Sprints Week 3"
        assert "100m" in messages[0].content

    def test_build_uses_settings(self, builder, test_config):
        """Test sampling parameters come from configuration."""
        request = builder.build("800m")

        assert request.model == test_config.default_model
        assert request.max_tokens == test_config.default_max_tokens
        assert request.temperature == test_config.default_temperature
        assert request.presence_penalty == 0.0
        assert request.frequency_penalty == 0.0

    def test_serialize(self, builder):
        """Test payload is a JSON-ready dict."""
        payload = LLMRequestBuilder.serialize(builder.build("800m"))

        assert payload["messages"][1] == {"role": "user", "content": "800m"}
        assert payload["max_tokens"] == 1000

    def test_serialize_rejects_nan(self):
        """Test non-JSON values raise a serialization error."""
        request = ChatCompletionRequest(
            model="m",
            messages=[ChatMessage(role="user", content="x")],
            temperature=float("nan"),
        )

        with pytest.raises(SerializationError) as exc_info:
            LLMRequestBuilder.serialize(request)

        assert not exc_info.value.retryable
        assert exc_info.value.message.startswith("Serialization Error:")
