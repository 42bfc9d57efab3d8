"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection
- Validation (positive pipeline limits, log level normalization)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Environment, Settings, get_settings


@pytest.fixture
def base_test_env():
    """Base environment dict for config tests.

    Provides minimal required settings. Tests can override specific values
    by merging with this dict.
    """
    return {"DATABASE_URL": "sqlite+aiosqlite:///:memory:"}


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestSettingsDefaults:
    def test_pipeline_defaults(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.slow_request_threshold_ms == 500
        assert settings.default_page_size == 10
        assert settings.max_page_size == 100
        assert settings.system_actor == "System"
        assert settings.log_level == "INFO"

    def test_database_url_is_required(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                Settings()  # type: ignore[call-arg]


@pytest.mark.unit
class TestSettingsValidation:
    def test_threshold_must_be_positive(self, base_test_env):
        env_values = base_test_env | {"SLOW_REQUEST_THRESHOLD_MS": "0"}
        with patch.dict(os.environ, env_values, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_threshold_override(self, base_test_env):
        env_values = base_test_env | {"SLOW_REQUEST_THRESHOLD_MS": "250"}
        with patch.dict(os.environ, env_values, clear=True):
            assert Settings().slow_request_threshold_ms == 250

    def test_log_level_is_upper_cased(self, base_test_env):
        env_values = base_test_env | {"LOG_LEVEL": "debug"}
        with patch.dict(os.environ, env_values, clear=True):
            assert Settings().log_level == "DEBUG"


@pytest.mark.unit
class TestEnvironmentDetection:
    @pytest.mark.parametrize(
        ("environment", "development", "testing", "production"),
        [
            ("development", True, False, False),
            ("testing", False, True, False),
            ("ci", False, True, False),
            ("production", False, False, True),
        ],
    )
    def test_environment_flags(
        self, base_test_env, environment, development, testing, production
    ):
        env_values = base_test_env | {"ENVIRONMENT": environment}
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.is_development is development
        assert settings.is_testing is testing
        assert settings.is_production is production


@pytest.mark.unit
def test_get_settings_is_cached(base_test_env):
    with patch.dict(os.environ, base_test_env, clear=True):
        assert get_settings() is get_settings()
