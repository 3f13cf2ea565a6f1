"""
LLM response parser.

Sandi Metz Principles:
- Single Responsibility: Decode and validate chat completion bodies
- Small methods: Each method < 10 lines
- Clear naming: Self-documenting code
"""

import json
from typing import Any, Dict

from coachgen.exceptions import InvalidResponseError
from coachgen.models.llm import LLMResponse


class LLMResponseParser:
    """
    Parser for chat completion response bodies.

    A body is usable when it decodes to an object with at least one choice
    whose message content is a non-empty string.
    """

    @staticmethod
    def parse(body: bytes) -> LLMResponse:
        """
        Parse response body.

        Args:
            body: Raw HTTP body of a 2xx response

        Returns:
            Standardized LLM response

        Raises:
            InvalidResponseError: If the body is empty, undecodable or has
                no content
        """
        data = LLMResponseParser._decode(body)
        content = LLMResponseParser._extract_content(data)
        usage = LLMResponseParser._extract_usage(data)

        return LLMResponse(
            content=content,
            model=str(data.get("model") or ""),
            prompt_tokens=usage["prompt_tokens"],
            completion_tokens=usage["completion_tokens"],
        )

    @staticmethod
    def _decode(body: bytes) -> Dict[str, Any]:
        if not body:
            raise InvalidResponseError("empty body")
        try:
            data = json.loads(body)
        except (UnicodeDecodeError, ValueError) as e:
            raise InvalidResponseError("body is not valid JSON") from e
        if not isinstance(data, dict):
            raise InvalidResponseError("body is not a JSON object")
        return data

    @staticmethod
    def _extract_content(data: Dict[str, Any]) -> str:
        """
        Extract first non-empty message content.

        Args:
            data: Decoded body

        Returns:
            Content text
        """
        choices = data.get("choices")
        if not isinstance(choices, list):
            raise InvalidResponseError("missing choices")

        for choice in choices:
            message = choice.get("message") if isinstance(choice, dict) else None
            content = message.get("content") if isinstance(message, dict) else None
            if isinstance(content, str) and content.strip():
                return content

        raise InvalidResponseError("no choice with content")

    @staticmethod
    def _extract_usage(data: Dict[str, Any]) -> Dict[str, int]:
        """
        Extract token usage, zero when absent.

        Args:
            data: Decoded body

        Returns:
            Dict with prompt_tokens and completion_tokens
        """
        usage = data.get("usage")
        if not isinstance(usage, dict):
            return {"prompt_tokens": 0, "completion_tokens": 0}

        return {
            "prompt_tokens": _as_count(usage.get("prompt_tokens")),
            "completion_tokens": _as_count(usage.get("completion_tokens")),
        }


def _as_count(value: Any) -> int:
    """Coerce a usage counter, falling back to 0."""
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return 0
