from __future__ import annotations

from typing import Any, Optional

import httpx
import structlog

from src.lunchguide.config import Config, get_config
from src.lunchguide.fetchers.base import Fetcher, FetchError

logger = structlog.get_logger(__name__)


class HttpFetcher(Fetcher):
    """
    Fetches day listings over HTTP.

    One client is shared by all days of a run; close it (or use `async with`)
    when the run is done.
    """

    def __init__(self, config: Optional[Config] = None, *, transport: Optional[Any] = None):
        self.config = config or get_config()
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.fetch_timeout_seconds),
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
            transport=transport,
        )

    async def fetch(self, weekday_name: str) -> bytes:
        url = self.config.day_url(weekday_name)
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(weekday_name, f"HTTP {e.response.status_code} from {url}") from e
        except httpx.RequestError as e:
            raise FetchError(weekday_name, f"request to {url} failed: {e}") from e

        logger.info(
            "Day listing downloaded",
            weekday=weekday_name,
            status=resp.status_code,
            length=len(resp.content),
        )
        return resp.content

    async def close(self) -> None:
        await self._client.aclose()
