"""
Application configuration management.

Following Sandi Metz principles:
- Single Responsibility: Configuration loading and validation
- Small class: Grouped settings per concern
- Clear naming: Descriptive property names
"""

from typing import List, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """
    Application configuration with validation.

    Loads from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="CoachGen", description="Application name")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API port")

    # LLM provider settings
    openai_api_key: str = Field(default="", description="OpenAI API key")
    openai_base_url: str = Field(
        default="https://api.openai.com/v1", description="Chat completions base URL"
    )
    default_model: str = Field(default="gpt-3.5-turbo", description="Default model")
    default_max_tokens: int = Field(default=1000, ge=1, description="Max tokens")
    default_temperature: float = Field(
        default=0.7, ge=0.0, le=2.0, description="Temperature"
    )
    presence_penalty: float = Field(
        default=0.0, ge=-2.0, le=2.0, description="Presence penalty"
    )
    frequency_penalty: float = Field(
        default=0.0, ge=-2.0, le=2.0, description="Frequency penalty"
    )

    # Network settings
    request_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Per-request timeout"
    )
    resource_timeout_seconds: float = Field(
        default=60.0, gt=0, description="Overall resource timeout"
    )
    retry_max_attempts: int = Field(default=3, ge=1, le=10, description="Attempts")
    retry_delay_seconds: float = Field(default=1.0, ge=0.0, description="Backoff")

    # Cache settings
    cache_max_entries: int = Field(default=50, ge=1, description="Max cached prompts")
    cache_max_age_seconds: float = Field(
        default=3600.0, gt=0, description="Max cached response age"
    )

    # Progress settings
    progress_step: float = Field(default=0.05, gt=0.0, le=1.0, description="Tick step")
    progress_interval_seconds: float = Field(
        default=0.1, gt=0.0, description="Tick interval"
    )
    progress_cap: float = Field(
        default=0.95, ge=0.0, le=1.0, description="Max progress while waiting"
    )

    # Connectivity settings
    probe_endpoints: str = Field(
        default="https://www.apple.com,https://www.google.com,https://api.openai.com",
        description="Reachability probe endpoints, in order",
    )
    probe_timeout_seconds: float = Field(
        default=3.0, gt=0, description="Per-endpoint probe timeout"
    )
    probe_overall_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Overall probe timeout"
    )
    monitor_poll_interval_seconds: float = Field(
        default=2.0, gt=0, description="Passive interface poll interval"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Validate and upper-case log level."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @model_validator(mode="after")
    def check_timeouts(self) -> "AppConfig":
        """Resource timeout must cover a full request."""
        if self.resource_timeout_seconds < self.request_timeout_seconds:
            raise ValueError("resource_timeout_seconds must be >= request_timeout_seconds")
        return self

    @property
    def probe_endpoints_list(self) -> List[str]:
        """Get probe endpoints as list."""
        return [url.strip() for url in self.probe_endpoints.split(",") if url.strip()]

    @property
    def has_api_key(self) -> bool:
        """Check if a non-empty API key is configured."""
        return bool(self.openai_api_key.strip())

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"


# Global configuration instance
config = AppConfig()
