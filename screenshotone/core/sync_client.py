"""
Synchronous Client
==================

Blocking facade over :class:`screenshotone.core.client.Client` for callers
without a running event loop.
"""

import asyncio
from typing import Optional

from yarl import URL

from screenshotone.core.client import BASE_URL, Client
from screenshotone.core.options import TakeOptions


class SyncClient:
    """Blocking ScreenshotOne client; each ``take`` runs on its own event loop."""

    def __init__(
        self,
        access_key: str,
        secret_key: Optional[str] = None,
        *,
        base_url: str = BASE_URL,
        timeout: Optional[float] = None,
    ):
        self.__access_key = access_key
        self.__secret_key = secret_key
        self.__base_url = base_url
        self.__timeout = timeout
        self.__client = self.__new_client()

    def __new_client(self) -> Client:
        return Client(
            self.__access_key,
            self.__secret_key,
            base_url=self.__base_url,
            timeout=self.__timeout,
        )

    def generate_take_url(self, options: TakeOptions) -> URL:
        return self.__client.generate_take_url(options)

    def generate_unsigned_take_url(self, options: TakeOptions) -> URL:
        return self.__client.generate_unsigned_take_url(options)

    def take(self, options: TakeOptions, *, timeout: Optional[float] = None) -> bytes:
        """Take a screenshot and block until the response body is read."""
        return asyncio.run(self.__take(options, timeout))

    async def __take(self, options: TakeOptions, timeout: Optional[float]) -> bytes:
        # aiohttp sessions are bound to the loop that created them
        async with self.__new_client() as client:
            return await client.take(options, timeout=timeout)
