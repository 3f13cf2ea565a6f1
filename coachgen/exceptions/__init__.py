"""
Custom exceptions for the application.

Generation failures are split into fatal errors, which are raised straight
to the caller, and retryable errors, which the dispatcher retries a bounded
number of times before surfacing them unchanged.
"""


class AppError(Exception):
    """Base exception for application errors."""

    pass


class GenerationError(AppError):
    """Raised when content generation fails."""

    retryable = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(GenerationError):
    """Raised when endpoint configuration is invalid."""

    def __init__(self, message: str = "Invalid URL"):
        super().__init__(message)


class SerializationError(GenerationError):
    """Raised when the request body cannot be serialized."""

    def __init__(self, cause: Exception):
        super().__init__(f"Serialization Error: {cause}")
        self.cause = cause


class AuthenticationError(GenerationError):
    """Raised when the provider rejects the API key."""

    def __init__(self, message: str = "Invalid API key"):
        super().__init__(f"Authentication Error: {message}")


class InvalidResponseError(GenerationError):
    """Raised when a successful response has no usable content."""

    def __init__(self, detail: str = ""):
        message = "Invalid response from server"
        super().__init__(f"{message}: {detail}" if detail else message)


class UnexpectedStatusError(GenerationError):
    """Raised for an HTTP status with no dedicated handling."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP Error: {status_code}")
        self.status_code = status_code


class RateLimitError(GenerationError):
    """Raised on HTTP 429."""

    retryable = True

    def __init__(
        self, message: str = "Too many requests. Please wait a moment and try again."
    ):
        super().__init__(f"Rate Limit Error: {message}")


class ServerError(GenerationError):
    """Raised on HTTP 5xx."""

    retryable = True

    def __init__(
        self,
        status_code: int,
        message: str = "Server error. Please try again in a few moments.",
    ):
        super().__init__(f"Server Error: {message}")
        self.status_code = status_code


class NetworkError(GenerationError):
    """Raised on transport failures (timeouts, resets, DNS)."""

    retryable = True

    def __init__(self, message: str, timed_out: bool = False):
        super().__init__(f"Network Error: {message}")
        self.timed_out = timed_out

    @classmethod
    def timeout(cls) -> "NetworkError":
        """Create the distinguished timeout error."""
        return cls(
            "Request timed out. Please check your connection and try again.",
            timed_out=True,
        )
