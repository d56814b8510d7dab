"""
ScreenshotOne SDK
=================

Client library for the ScreenshotOne screenshot rendering API.

This package provides:
- A chainable builder for ``/take`` rendering options
- Canonical query encoding and HMAC-SHA256 URL signing
- An aiohttp-based async client and a blocking facade
- Pydantic settings for loading credentials from the environment
"""

__version__ = "1.0.0"
__author__ = "ScreenshotOne SDK Team"

from screenshotone.core.client import (
    BASE_URL,
    Client,
    MissingSecretError,
    RemoteError,
    ScreenshotOneError,
    TransportError,
    URLConstructionError,
    sign,
)
from screenshotone.core.options import ParameterSet, TakeOptions
from screenshotone.core.sync_client import SyncClient
from screenshotone.models.parameters import Parameter

__all__ = [
    "BASE_URL",
    "Client",
    "SyncClient",
    "TakeOptions",
    "ParameterSet",
    "Parameter",
    "sign",
    "ScreenshotOneError",
    "MissingSecretError",
    "URLConstructionError",
    "TransportError",
    "RemoteError",
]
