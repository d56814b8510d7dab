"""
Test Configuration
==================

Pytest configuration with fixtures shared by unit and integration tests.
Provides test settings, credentials, mock transports and clients.
"""

import pytest
from unittest.mock import patch

from pydantic_settings import SettingsConfigDict

from screenshotone.config.settings import Settings
from screenshotone.core.client import Client

from tests.data import ACCESS_KEY, SECRET_KEY
from tests.utils.mocks import MockResponse, MockSession


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    log_level: str = "DEBUG"
    request_timeout: float = 5.0
    connect_timeout: float = 2.0

    model_config = SettingsConfigDict(env_file=None, env_prefix="SCREENSHOTONE_TEST_")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(autouse=True)
def override_settings(test_settings: TestSettings):
    """Override client settings for testing."""
    with patch("screenshotone.core.client.get_settings", return_value=test_settings):
        yield test_settings


@pytest.fixture
def mock_session() -> MockSession:
    """Mock transport returning a small PNG-like body."""
    return MockSession(MockResponse(status=200, reason="OK", body=b"\x89PNG test image data"))


@pytest.fixture
def client() -> Client:
    """Client with the published test credentials."""
    return Client(ACCESS_KEY, SECRET_KEY)


@pytest.fixture
def unsigned_client() -> Client:
    """Client without a secret key."""
    return Client("test-key")
