"""Test configuration module."""

import pytest
from pydantic import ValidationError

from coachgen.config import AppConfig


class TestAppConfig:
    """Test AppConfig class."""

    def test_defaults(self):
        """Test default values."""
        config = AppConfig(_env_file=None)

        assert config.default_model == "gpt-3.5-turbo"
        assert config.default_max_tokens == 1000
        assert config.default_temperature == 0.7
        assert config.request_timeout_seconds == 30.0
        assert config.resource_timeout_seconds == 60.0
        assert config.retry_max_attempts == 3
        assert config.retry_delay_seconds == 1.0

    def test_log_level_is_upper_cased(self):
        """Test log level normalization."""
        config = AppConfig(_env_file=None, log_level="debug")
        assert config.log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        """Test invalid log level raises."""
        with pytest.raises(ValidationError):
            AppConfig(_env_file=None, log_level="LOUD")

    def test_resource_timeout_must_cover_request_timeout(self):
        """Test timeout consistency check."""
        with pytest.raises(ValidationError):
            AppConfig(
                _env_file=None, request_timeout_seconds=30, resource_timeout_seconds=10
            )

    def test_probe_endpoints_list(self):
        """Test comma-separated endpoint parsing."""
        config = AppConfig(_env_file=None, probe_endpoints=" https://a.test , ,https://b.test")
        assert config.probe_endpoints_list == ["https://a.test", "https://b.test"]

    def test_has_api_key(self):
        """Test blank keys count as missing."""
        assert AppConfig(_env_file=None, openai_api_key="sk-1").has_api_key
        assert not AppConfig(_env_file=None, openai_api_key="   ").has_api_key

    def test_environment_flags(self):
        """Test environment helpers."""
        config = AppConfig(_env_file=None, app_env="production")
        assert config.is_production
        assert not config.is_development

    def test_reads_environment(self, monkeypatch):
        """Test settings are loaded from environment variables."""
        monkeypatch.setenv("DEFAULT_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("CACHE_MAX_ENTRIES", "5")

        config = AppConfig(_env_file=None)

        assert config.default_model == "gpt-4o-mini"
        assert config.cache_max_entries == 5
