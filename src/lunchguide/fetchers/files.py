from __future__ import annotations

from pathlib import Path
from typing import Union

import structlog

from src.lunchguide.fetchers.base import Fetcher, FetchError

logger = structlog.get_logger(__name__)


class FileFetcher(Fetcher):
    """
    Reads day listings saved as `<Weekday>.html` in a directory.

    Useful for re-running extraction on pages captured earlier.
    """

    def __init__(self, pages_dir: Union[str, Path], suffix: str = ".html"):
        self.pages_dir = Path(pages_dir)
        self.suffix = suffix

    def path_for(self, weekday_name: str) -> Path:
        return self.pages_dir / f"{weekday_name}{self.suffix}"

    async def fetch(self, weekday_name: str) -> bytes:
        path = self.path_for(weekday_name)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FetchError(weekday_name, f"cannot read {path}: {e}") from e

        logger.debug("Day listing loaded", weekday=weekday_name, path=str(path), length=len(data))
        return data
