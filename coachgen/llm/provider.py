"""
LLM provider base class and interface.

Sandi Metz Principles:
- Single Responsibility: Provider abstraction
- Interface Segregation: Minimal provider interface
- Dependency Inversion: Depend on abstraction, not concrete classes
"""

from abc import ABC, abstractmethod

from coachgen.models.llm import ChatCompletionRequest, LLMResponse


class BaseLLMProvider(ABC):
    """
    Abstract base class for LLM providers.

    complete() performs exactly one attempt; retrying is the caller's job.
    """

    @abstractmethod
    async def complete(self, request: ChatCompletionRequest) -> LLMResponse:
        """
        Generate completion for request.

        Args:
            request: Chat completion request

        Returns:
            LLM response

        Raises:
            GenerationError: Classified failure of this attempt
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """
        Get provider name.

        Returns:
            Provider name (e.g., "openai")
        """
        pass

    async def aclose(self) -> None:
        """Release network resources."""
        return None

    def _build_error_message(self, error: Exception, context: str) -> str:
        """
        Build error message with context.

        Args:
            error: The exception that occurred
            context: Context description

        Returns:
            Formatted error message
        """
        return f"{context}: {type(error).__name__} - {str(error)}"
