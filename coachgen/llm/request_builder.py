"""
LLM request builder.

Sandi Metz Principles:
- Single Responsibility: Build chat completion requests
- Small methods: Each method < 10 lines
- Clear naming: Self-documenting code
"""

import json
from typing import Any, Dict, List, Optional

from coachgen.config import AppConfig, config
from coachgen.exceptions import SerializationError
from coachgen.llm.system_prompts import build_system_prompt
from coachgen.models.llm import ChatCompletionRequest, ChatMessage


class LLMRequestBuilder:
    """
    Builder for chat completion requests.

    Pairs the event-specific system message with the user prompt and
    fills sampling parameters from configuration.
    """

    def __init__(self, settings: Optional[AppConfig] = None):
        """
        Initialize request builder.

        Args:
            settings: Configuration (global config if None)
        """
        self._settings = settings or config

    def build_messages(self, prompt: str) -> List[ChatMessage]:
        """
        Build messages array.

        Args:
            prompt: User prompt

        Returns:
            System message followed by user message
        """
        return [
            ChatMessage(role="system", content=build_system_prompt(prompt)),
            ChatMessage(role="user", content=prompt),
        ]

    def build(self, prompt: str) -> ChatCompletionRequest:
        """
        Build request for prompt.

        Args:
            prompt: User prompt

        Returns:
            Chat completion request
        """
        return ChatCompletionRequest(
            model=self._settings.default_model,
            messages=self.build_messages(prompt),
            temperature=self._settings.default_temperature,
            max_tokens=self._settings.default_max_tokens,
            presence_penalty=self._settings.presence_penalty,
            frequency_penalty=self._settings.frequency_penalty,
        )

    @staticmethod
    def serialize(request: ChatCompletionRequest) -> Dict[str, Any]:
        """
        Produce a JSON-safe payload.

        Args:
            request: Chat completion request

        Returns:
            Payload dict, verified to serialize as strict JSON

        Raises:
            SerializationError: If the payload is not valid JSON
        """
        payload = request.to_payload()
        try:
            json.dumps(payload, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(e) from e
        return payload
