from __future__ import annotations

from abc import ABC, abstractmethod


class FetchError(Exception):
    """Raised when a day's listing could not be retrieved."""

    def __init__(self, weekday_name: str, message: str):
        super().__init__(f"{weekday_name}: {message}")
        self.weekday_name = weekday_name


class Fetcher(ABC):
    @abstractmethod
    async def fetch(self, weekday_name: str) -> bytes:
        """Return the raw listing for one weekday or raise FetchError."""
        raise NotImplementedError

    async def close(self) -> None:
        return None

    async def __aenter__(self) -> "Fetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
