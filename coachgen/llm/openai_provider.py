"""
OpenAI-compatible chat completions provider.

Sandi Metz Principles:
- Single Responsibility: One chat completion attempt over HTTP
- Small methods: Classification isolated per failure kind
- Dependency Injection: API key, settings and HTTP client injected
"""

from typing import Optional

import httpx
from openai import APIConnectionError, APIStatusError, APITimeoutError, AsyncOpenAI

from coachgen.config import AppConfig, config
from coachgen.exceptions import (
    AuthenticationError,
    ConfigurationError,
    GenerationError,
    NetworkError,
    RateLimitError,
    ServerError,
    UnexpectedStatusError,
)
from coachgen.llm.provider import BaseLLMProvider
from coachgen.llm.request_builder import LLMRequestBuilder
from coachgen.llm.response_parser import LLMResponseParser
from coachgen.llm.timeout_handler import TimeoutConfig, TimeoutHandler
from coachgen.models.llm import ChatCompletionRequest, LLMResponse
from coachgen.utils.logger import get_logger

logger = get_logger(__name__)


class OpenAIProvider(BaseLLMProvider):
    """
    OpenAI implementation of LLM provider.

    SDK retries are disabled so every call is exactly one HTTP attempt.
    The 2xx body is decoded here rather than by the SDK so that empty or
    malformed bodies are reported as invalid responses.
    """

    def __init__(
        self,
        api_key: str,
        settings: Optional[AppConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout_handler: Optional[TimeoutHandler] = None,
    ):
        """
        Initialize OpenAI provider.

        Args:
            api_key: Bearer token
            settings: Configuration (global config if None)
            http_client: Optional HTTP client (SDK default if None)
            timeout_handler: Overall timeout guard (resource timeout if None)
        """
        self._api_key = api_key
        self._settings = settings or config
        self._http_client = http_client
        self._client: Optional[AsyncOpenAI] = None
        self._timeout_handler = timeout_handler or TimeoutHandler(
            TimeoutConfig(timeout_seconds=self._settings.resource_timeout_seconds)
        )

    async def complete(self, request: ChatCompletionRequest) -> LLMResponse:
        """
        Perform one chat completion attempt.

        Args:
            request: Chat completion request

        Returns:
            LLM response

        Raises:
            GenerationError: Classified failure
        """
        payload = LLMRequestBuilder.serialize(request)
        client = self._get_client()

        try:
            raw = await self._timeout_handler.execute(
                lambda: client.chat.completions.with_raw_response.create(**payload)
            )
        except APIStatusError as e:
            raise self._classify_status(e.status_code, e) from e
        except APITimeoutError as e:
            logger.warning("Chat completion timed out")
            raise NetworkError.timeout() from e
        except APIConnectionError as e:
            message = self._build_error_message(e, "Connection error")
            raise NetworkError(message) from e

        response = LLMResponseParser.parse(raw.http_response.content)
        logger.debug("Chat completion decoded", model=response.model)
        return response

    def get_name(self) -> str:
        """
        Get provider name.

        Returns:
            Provider name
        """
        return "openai"

    async def aclose(self) -> None:
        """Close the SDK client and its HTTP pool."""
        if self._client is not None:
            await self._client.close()
            self._client = None

    @staticmethod
    def _classify_status(status_code: int, error: Exception) -> GenerationError:
        """
        Map a non-2xx status to a generation error.

        Args:
            status_code: HTTP status
            error: SDK error

        Returns:
            Fatal or retryable error
        """
        logger.warning("Chat completion failed", status_code=status_code)
        if status_code == 401:
            return AuthenticationError()
        if status_code == 429:
            return RateLimitError()
        if 500 <= status_code <= 599:
            return ServerError(status_code)
        return UnexpectedStatusError(status_code)

    def _get_client(self) -> AsyncOpenAI:
        """
        Get or create OpenAI client.

        Returns:
            OpenAI async client

        Raises:
            ConfigurationError: If the base URL is not an http(s) URL
        """
        if not self._client:
            base_url = self._validated_base_url()
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=base_url,
                max_retries=0,
                timeout=httpx.Timeout(self._settings.request_timeout_seconds),
                http_client=self._http_client,
            )
        return self._client

    def _validated_base_url(self) -> str:
        try:
            url = httpx.URL(self._settings.openai_base_url)
        except httpx.InvalidURL as e:
            raise ConfigurationError() from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError()
        return str(url)
