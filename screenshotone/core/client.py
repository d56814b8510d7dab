"""
ScreenshotOne Client
====================

Async HTTP client for the ScreenshotOne ``/take`` API.
Builds canonical, optionally signed request URLs and downloads the rendered result.
"""

import asyncio
import hashlib
import hmac
from typing import Any, Optional

import aiohttp
from yarl import URL

from screenshotone.config.logging import get_logger
from screenshotone.config.settings import DEFAULT_BASE_URL, Settings, get_settings
from screenshotone.core.options import TakeOptions
from screenshotone.models.parameters import Parameter
from screenshotone.models.schemas import Credentials

logger = get_logger(__name__)

BASE_URL = DEFAULT_BASE_URL
TAKE_PATH = "/take"
SUCCESS_STATUSES = frozenset({200, 201})


class ScreenshotOneError(Exception):
    """Base exception for all client errors."""

    pass


class MissingSecretError(ScreenshotOneError):
    """Raised when a signed URL is requested but no secret key is configured."""

    pass


class URLConstructionError(ScreenshotOneError):
    """Raised when the API base endpoint cannot be parsed."""

    pass


class TransportError(ScreenshotOneError):
    """Raised when the HTTP request fails before a response is received or read."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RemoteError(ScreenshotOneError):
    """Raised when the API responds with a status other than 200 or 201."""

    def __init__(self, status: int, reason: str):
        super().__init__(f"the server returned a response: {status} {reason}")
        self.status = status
        self.reason = reason


def sign(query: str, secret_key: str) -> str:
    """
    Sign a query string.

    Args:
        query: Encoded query string, exactly as it will be sent
        secret_key: Secret key used as the HMAC key

    Returns:
        Lowercase hex HMAC-SHA256 digest
    """
    return hmac.new(secret_key.encode(), query.encode(), hashlib.sha256).hexdigest()


class Client:
    """
    Client for the ScreenshotOne API.

    The client holds no per-request state and may be shared between concurrent
    tasks. ``session`` is the HTTP transport; when omitted the client creates
    its own ``aiohttp.ClientSession`` and closes it in :meth:`close`.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
        *,
        base_url: str = BASE_URL,
        timeout: Optional[float] = None,
    ):
        self.credentials = Credentials(access_key=access_key, secret_key=secret_key)
        self.base_url = base_url
        self.timeout = timeout
        self.logger: Any = logger.bind(component="screenshotone_client")  # structlog.BoundLoggerBase
        self._session = session
        self._own_session = session is None

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, session: Optional[aiohttp.ClientSession] = None
    ) -> "Client":
        """Create a client from ``SCREENSHOTONE_*`` settings."""
        settings = settings or get_settings()
        if not settings.access_key:
            raise ValueError("SCREENSHOTONE_ACCESS_KEY is not configured")

        return cls(
            settings.access_key,
            settings.secret_key,
            session,
            base_url=settings.base_url,
        )

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or (self._own_session and self._session.closed):
            settings = get_settings()
            timeout = aiohttp.ClientTimeout(total=settings.request_timeout, connect=settings.connect_timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if the client created it."""
        if self._own_session and self._session and not self._session.closed:
            await self._session.close()
        if self._own_session:
            self._session = None

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _take_endpoint(self) -> str:
        try:
            base = URL(self.base_url)
        except (TypeError, ValueError) as e:
            raise URLConstructionError(f'failed to parse URL "{self.base_url}": {e}') from e

        if not base.is_absolute() or base.scheme not in ("http", "https"):
            raise URLConstructionError(f'failed to parse URL "{self.base_url}": not an absolute URL')

        return str(base).rstrip("/") + TAKE_PATH

    def _build_url(self, options: TakeOptions, signed: bool) -> URL:
        endpoint = self._take_endpoint()

        query = options.parameters
        query.set(Parameter.ACCESS_KEY, self.credentials.access_key)
        query_string = query.encode()

        if signed:
            signature = sign(query_string, self.credentials.secret_key or "")
            # appended after encoding, so it is never sorted into the query
            query_string += f"&{Parameter.SIGNATURE.value}={signature}"

        self.logger.debug("Take URL generated", parameters=len(query), signed=signed)
        return URL(f"{endpoint}?{query_string}", encoded=True)

    def generate_take_url(self, options: TakeOptions) -> URL:
        """
        Generate a signed URL for taking screenshots without sending a request.

        Args:
            options: Take options

        Returns:
            Absolute request URL with a trailing ``signature`` parameter

        Raises:
            MissingSecretError: If the client has no secret key
            URLConstructionError: If the base endpoint cannot be parsed
        """
        if not self.credentials.can_sign:
            raise MissingSecretError("secret key is required to generate a signed URL")

        return self._build_url(options, signed=True)

    def generate_unsigned_take_url(self, options: TakeOptions) -> URL:
        """Generate a URL without a signature; does not need a secret key."""
        return self._build_url(options, signed=False)

    async def take(self, options: TakeOptions, *, timeout: Optional[float] = None) -> bytes:
        """
        Take a screenshot and return the response body.

        The call is cancelled with the awaiting task. ``timeout`` (seconds, falling
        back to the client default) bounds the whole round-trip and raises
        ``asyncio.TimeoutError`` when exceeded.

        Args:
            options: Take options
            timeout: Optional deadline for this call

        Returns:
            Image (or document) bytes; may be empty for status 201

        Raises:
            MissingSecretError: If the client has no secret key
            TransportError: If the request fails or the session timeout expires
            RemoteError: If the API responds with a status other than 200 or 201
        """
        url = self.generate_take_url(options)

        timeout = timeout if timeout is not None else self.timeout
        if timeout is None:
            return await self._fetch(url)
        return await asyncio.wait_for(self._fetch(url), timeout)

    async def _fetch(self, url: URL) -> bytes:
        session = await self._get_session()

        try:
            async with session.get(url) as response:
                self.logger.debug("Take response received", status=response.status)

                if response.status not in SUCCESS_STATUSES:
                    raise RemoteError(response.status, response.reason or "")

                image = await response.read()
        except aiohttp.ClientError as e:
            raise TransportError(f"failed to execute HTTP request: {e}", cause=e) from e
        except asyncio.TimeoutError as e:
            # total/connect timeout of the session, not the caller deadline
            raise TransportError("HTTP request timed out", cause=e) from e

        self.logger.debug("Take completed", size=len(image))
        return image
