"""
Unit Tests for Settings
=======================
"""

import pytest
from pydantic import ValidationError

from screenshotone.config import settings as settings_module
from screenshotone.config.settings import DEFAULT_BASE_URL, Settings, get_settings, reload_settings
from screenshotone.core.client import Client
from screenshotone.core.options import TakeOptions
from screenshotone.core.sync_client import SyncClient


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the host environment and any local .env file."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "SCREENSHOTONE_ACCESS_KEY",
        "SCREENSHOTONE_SECRET_KEY",
        "SCREENSHOTONE_BASE_URL",
        "SCREENSHOTONE_ENVIRONMENT",
        "SCREENSHOTONE_LOG_LEVEL",
        "SCREENSHOTONE_REQUEST_TIMEOUT",
        "SCREENSHOTONE_CONNECT_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "settings", None)


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, clean_env):
        settings = Settings()

        assert settings.access_key is None
        assert settings.secret_key is None
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.request_timeout == 60.0
        assert settings.environment == "development"
        assert settings.log_level == "INFO"

    def test_reads_prefixed_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("SCREENSHOTONE_ACCESS_KEY", "env-access")
        monkeypatch.setenv("SCREENSHOTONE_SECRET_KEY", "env-secret")
        monkeypatch.setenv("SCREENSHOTONE_REQUEST_TIMEOUT", "12.5")

        settings = Settings()

        assert settings.access_key == "env-access"
        assert settings.secret_key == "env-secret"
        assert settings.request_timeout == 12.5

    def test_reads_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("SCREENSHOTONE_ACCESS_KEY=file-access\n", encoding="utf-8")

        assert Settings().access_key == "file-access"

    def test_log_level_is_upper_cased(self, clean_env, monkeypatch):
        monkeypatch.setenv("SCREENSHOTONE_LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    @pytest.mark.parametrize(
        "name,value",
        [
            ("SCREENSHOTONE_LOG_LEVEL", "verbose"),
            ("SCREENSHOTONE_ENVIRONMENT", "staging"),
            ("SCREENSHOTONE_REQUEST_TIMEOUT", "0"),
        ],
    )
    def test_invalid_values(self, clean_env, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self, clean_env):
        assert get_settings() is get_settings()

    def test_reload_settings(self, clean_env, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("SCREENSHOTONE_ACCESS_KEY", "reloaded")

        second = reload_settings()

        assert second is not first
        assert second.access_key == "reloaded"
        assert get_settings() is second


class TestClientWithoutSettings:
    """URL generation must not depend on the environment."""

    def test_invalid_environment_does_not_break_url_generation(self, clean_env, monkeypatch):
        monkeypatch.setenv("SCREENSHOTONE_ENVIRONMENT", "staging")
        monkeypatch.setattr("screenshotone.core.client.get_settings", get_settings)

        with pytest.raises(ValidationError):
            Settings()

        url = Client("k", "s").generate_unsigned_take_url(TakeOptions.url("https://a"))
        assert str(url) == "https://api.screenshotone.com/take?access_key=k&url=https%3A%2F%2Fa"

        signed = SyncClient("k", "s").generate_take_url(TakeOptions.url("https://a"))
        assert signed.raw_query_string.startswith("access_key=k&url=https%3A%2F%2Fa&signature=")
