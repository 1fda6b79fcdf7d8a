# auction_scout/crawler/fetcher.py
"""
Fetcher module: one GET per listing page, no retries.

Any transport problem is raised as :class:`FetchError` so the walker can stop
the current site and keep what it already has.
"""
from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from aiohttp import ClientError, ClientSession, ClientTimeout

from auction_scout.config import AppConfig
from auction_scout.crawler.models import PageData
from auction_scout.errors import FetchError


class Fetcher:
    """Sequential HTTP fetcher bound to an aiohttp session."""

    def __init__(self, session: ClientSession, config: AppConfig) -> None:
        self.session = session
        self.config = config

    @classmethod
    @asynccontextmanager
    async def open(cls, config: AppConfig) -> AsyncIterator["Fetcher"]:
        """Create a session for the duration of a run and close it afterwards."""
        timeout = ClientTimeout(total=config.timeout) if config.timeout else None
        kwargs = {"headers": {"User-Agent": config.user_agent}}
        if timeout is not None:
            kwargs["timeout"] = timeout
        async with ClientSession(**kwargs) as session:
            yield cls(session, config)

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its HTML.

        Raises FetchError on connection errors, timeouts, non-2xx statuses
        and bodies that cannot be decoded.
        """
        try:
            async with self.session.get(url, raise_for_status=True) as resp:
                text = await resp.text()
        except asyncio.TimeoutError as exc:
            raise FetchError(url, f"timed out fetching {url}") from exc
        except ClientError as exc:
            raise FetchError(url, str(exc) or exc.__class__.__name__) from exc
        except UnicodeDecodeError as exc:
            raise FetchError(url, f"cannot decode body of {url}: {exc}") from exc
        return PageData(str(url), text)
