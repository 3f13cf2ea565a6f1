"""
Training content generation client.

Orchestrates cache lookup, connectivity decision, bounded-retry dispatch,
progress reporting and parsing.

    cache hit      -> parse cached text
    offline        -> parse offline template for the prompt
    online         -> dispatch (fixed-delay retries) -> cache -> parse

Sandi Metz Principles:
- Single Responsibility: Generation orchestration
- Small methods: One branch per method
- Dependency Injection: Every collaborator injected
"""

from typing import Callable, List, Optional

from coachgen.cache.response_cache import ResponseCache
from coachgen.config import AppConfig, config
from coachgen.connectivity.monitor import ConnectivityMonitor
from coachgen.exceptions import ConfigurationError, GenerationError
from coachgen.llm.openai_provider import OpenAIProvider
from coachgen.llm.provider import BaseLLMProvider
from coachgen.llm.request_builder import LLMRequestBuilder
from coachgen.llm.retry import RetryConfig, RetryHandler
from coachgen.models.connectivity import ConnectivityState
from coachgen.models.document import ContentSource, GenerationResult, StructuredDocument
from coachgen.offline.provider import OfflineTemplateProvider
from coachgen.parsing.content_parser import ContentParser
from coachgen.services.progress import ProgressListener, ProgressTracker
from coachgen.utils.logger import get_logger, log_llm_call

logger = get_logger(__name__)


class GenerationClient:
    """
    Resilient generation client.

    Calls with distinct prompts run independently, each with its own
    retry state and progress tracker. Concurrent calls with the same
    prompt are not merged.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[AppConfig] = None,
        monitor: Optional[ConnectivityMonitor] = None,
        cache: Optional[ResponseCache] = None,
        templates: Optional[OfflineTemplateProvider] = None,
        parser: Optional[ContentParser] = None,
        provider: Optional[BaseLLMProvider] = None,
        request_builder: Optional[LLMRequestBuilder] = None,
        retry_handler: Optional[RetryHandler] = None,
    ):
        """
        Initialize client.

        Args:
            api_key: Bearer token (settings value if None). Without a token
                and without an injected provider the client serves offline
                templates only.
            settings: Configuration (global config if None)
            monitor: Connectivity monitor
            cache: Response cache
            templates: Offline template provider
            parser: Content parser
            provider: LLM provider (OpenAI provider if None)
            request_builder: Request builder
            retry_handler: Retry handler
        """
        self._settings = settings or config
        token = api_key if api_key is not None else self._settings.openai_api_key
        self._monitor = monitor or ConnectivityMonitor()
        self._cache = cache or ResponseCache(
            max_entries=self._settings.cache_max_entries,
            max_age_seconds=self._settings.cache_max_age_seconds,
        )
        self._templates = templates or OfflineTemplateProvider()
        self._parser = parser or ContentParser()
        self._builder = request_builder or LLMRequestBuilder(self._settings)
        self._provider = provider
        if self._provider is None and token.strip():
            self._provider = OpenAIProvider(token.strip(), settings=self._settings)
        self._retry = retry_handler or RetryHandler(
            RetryConfig(
                max_attempts=self._settings.retry_max_attempts,
                delay=self._settings.retry_delay_seconds,
            )
        )
        self._latest_progress: Optional[ProgressTracker] = None
        self._progress_listeners: List[ProgressListener] = []

        if self._provider is None:
            logger.warning("No API key configured, serving offline templates only")

    @property
    def progress(self) -> float:
        """Progress of the most recently started call."""
        if self._latest_progress is None:
            return 0.0
        return self._latest_progress.value

    @property
    def is_offline(self) -> bool:
        """Passive offline flag."""
        return not self._monitor.is_online

    @property
    def connectivity(self) -> ConnectivityState:
        return self._monitor.state

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    @property
    def has_provider(self) -> bool:
        return self._provider is not None

    def add_progress_listener(self, listener: ProgressListener) -> None:
        """Register a callback receiving progress values of every call."""
        self._progress_listeners.append(listener)

    def start(self) -> None:
        """Start background connectivity monitoring."""
        self._monitor.start()

    async def aclose(self) -> None:
        """Stop monitoring and release network resources."""
        await self._monitor.stop()
        if self._provider is not None:
            await self._provider.aclose()

    async def __aenter__(self) -> "GenerationClient":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def generate(
        self,
        prompt: str,
        on_progress: Optional[Callable[[float], None]] = None,
    ) -> StructuredDocument:
        """
        Generate structured content for prompt.

        Args:
            prompt: Prompt text
            on_progress: Optional per-call progress callback

        Returns:
            Parsed document (from cache, network or offline template)

        Raises:
            GenerationError: Fatal error or exhausted retries
        """
        result = await self.generate_with_source(prompt, on_progress)
        return result.document

    async def generate_with_source(
        self,
        prompt: str,
        on_progress: Optional[Callable[[float], None]] = None,
    ) -> GenerationResult:
        """
        Generate structured content and report where it came from.

        Args:
            prompt: Prompt text
            on_progress: Optional per-call progress callback

        Returns:
            Parsed document tagged cache, network or offline

        Raises:
            GenerationError: Fatal error or exhausted retries
        """
        tracker = self._new_tracker(on_progress)
        try:
            cached = self._cache.get(prompt)
            if cached is not None:
                return self._result(cached, ContentSource.CACHE)

            if not await self._is_reachable():
                return self._generate_offline(prompt)

            async with tracker.ticking():
                text = await self._dispatch(prompt)

            self._cache.put(prompt, text)
            return self._result(text, ContentSource.NETWORK)
        finally:
            tracker.complete()

    def _result(self, text: str, source: ContentSource) -> GenerationResult:
        return GenerationResult(document=self._parser.parse(text), source=source)

    def _new_tracker(
        self, on_progress: Optional[Callable[[float], None]]
    ) -> ProgressTracker:
        tracker = ProgressTracker(
            step=self._settings.progress_step,
            interval=self._settings.progress_interval_seconds,
            cap=self._settings.progress_cap,
        )
        if on_progress is not None:
            tracker.add_listener(on_progress)
        for listener in self._progress_listeners:
            tracker.add_listener(listener)
        self._latest_progress = tracker
        return tracker

    async def _is_reachable(self) -> bool:
        """
        Decide between network dispatch and offline content.

        Passive state is trusted when online; an offline reading is
        confirmed by the active probe before giving up.

        Returns:
            True if the request should go to the network
        """
        if self._provider is None:
            return False
        if self._monitor.is_online:
            return True

        logger.info("Passive state offline, probing", state=self._monitor.state.model_dump())
        return await self._monitor.probe()

    def _generate_offline(self, prompt: str) -> GenerationResult:
        """
        Build document from the offline template.

        Args:
            prompt: Prompt text

        Returns:
            Parsed template
        """
        return self._result(self._templates.template_for(prompt), ContentSource.OFFLINE)

    async def _dispatch(self, prompt: str) -> str:
        """
        Send prompt with bounded retries.

        Args:
            prompt: Prompt text

        Returns:
            Raw generated text
        """
        provider = self._provider
        if provider is None:
            raise ConfigurationError("No LLM provider configured")
        request = self._builder.build(prompt)

        async def attempt(number: int) -> str:
            try:
                response = await provider.complete(request)
            except GenerationError as e:
                status = "retryable" if e.retryable else "fatal"
                log_llm_call(request.model, number + 1, status, error=str(e))
                raise

            log_llm_call(
                request.model, number + 1, "success", tokens=response.total_tokens
            )
            return response.content

        return await self._retry.execute(attempt)
