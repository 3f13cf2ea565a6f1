"""Test LLM response parser."""

import json

import pytest

from coachgen.exceptions import InvalidResponseError
from coachgen.llm.response_parser import LLMResponseParser
from tests.mocks.llm_mocks import completion_body


def encode(data) -> bytes:
    return json.dumps(data).encode()


class TestLLMResponseParser:
    """Test LLMResponseParser class."""

    def test_parse(self):
        """Test standard body."""
        response = LLMResponseParser.parse(encode(completion_body("MONDAY")))

        assert response.content == "MONDAY"
        assert response.model == "gpt-3.5-turbo"
        assert response.total_tokens == 15

    def test_skips_empty_choices(self):
        """Test first non-empty content is used."""
        body = {
            "choices": [
                {"message": {"content": ""}},
                {"message": {"content": None}},
                {"message": {"content": "second"}},
            ]
        }

        assert LLMResponseParser.parse(encode(body)).content == "second"

    def test_missing_usage(self):
        """Test usage defaults to zero."""
        body = {"choices": [{"message": {"content": "x"}}]}

        response = LLMResponseParser.parse(encode(body))

        assert response.prompt_tokens == 0
        assert response.completion_tokens == 0
        assert response.model == ""

    def test_bad_usage_values(self):
        """Test malformed counters fall back to zero."""
        body = {
            "choices": [{"message": {"content": "x"}}],
            "usage": {"prompt_tokens": "ten", "completion_tokens": True},
        }

        assert LLMResponseParser.parse(encode(body)).total_tokens == 0

    @pytest.mark.parametrize(
        "body",
        [
            b"",
            b"not json",
            b"\xff\xfe",
            b"[]",
            encode({}),
            encode({"choices": []}),
            encode({"choices": [{"message": {"content": "   "}}]}),
            encode({"choices": ["text"]}),
        ],
    )
    def test_invalid_bodies(self, body):
        """Test unusable bodies raise invalid response errors."""
        with pytest.raises(InvalidResponseError) as exc_info:
            LLMResponseParser.parse(body)

        assert not exc_info.value.retryable
