"""
Unit Tests for the Synchronous Client
=====================================
"""

from unittest.mock import patch

import pytest

from screenshotone.core.client import MissingSecretError, RemoteError
from screenshotone.core.options import TakeOptions
from screenshotone.core.sync_client import SyncClient

from tests.data import ACCESS_KEY, SECRET_KEY, README_EXAMPLE
from tests.utils.mocks import MockResponse, MockSession


class TestSyncClient:
    """Test the blocking facade."""

    def test_generate_take_url(self):
        client = SyncClient(ACCESS_KEY, SECRET_KEY)

        assert str(client.generate_take_url(README_EXAMPLE.build())) == README_EXAMPLE.expected_url

    def test_generate_unsigned_take_url(self):
        client = SyncClient("test-key")
        url = client.generate_unsigned_take_url(TakeOptions.url("https://example.com"))

        assert str(url) == "https://api.screenshotone.com/take?access_key=test-key&url=https%3A%2F%2Fexample.com"

    def test_generate_take_url_requires_secret(self):
        with pytest.raises(MissingSecretError):
            SyncClient("test-key").generate_take_url(TakeOptions.url("https://example.com"))

    def test_take_returns_body_and_closes_session(self):
        session = MockSession(MockResponse(status=200, body=b"sync image"))

        with patch("screenshotone.core.client.aiohttp.ClientSession", return_value=session):
            image = SyncClient("test-key", "test-secret").take(TakeOptions.url("https://example.com"))

        assert image == b"sync image"
        assert session.closed is True

    def test_take_propagates_remote_errors(self):
        session = MockSession(MockResponse(status=400, reason="Bad Request"))

        with patch("screenshotone.core.client.aiohttp.ClientSession", return_value=session):
            with pytest.raises(RemoteError, match="400 Bad Request"):
                SyncClient("test-key", "test-secret").take(TakeOptions.url("https://example.com"))

        assert session.closed is True

    def test_repeated_takes_use_fresh_sessions(self):
        sessions = [
            MockSession(MockResponse(status=200, body=b"first")),
            MockSession(MockResponse(status=201, body=b"")),
        ]
        client = SyncClient("test-key", "test-secret")

        with patch("screenshotone.core.client.aiohttp.ClientSession", side_effect=sessions):
            assert client.take(TakeOptions.url("https://example.com")) == b"first"
            assert client.take(TakeOptions.url("https://example.com")) == b""

        assert all(session.closed for session in sessions)
