from src.lunchguide.fetchers.base import Fetcher, FetchError
from src.lunchguide.fetchers.files import FileFetcher
from src.lunchguide.fetchers.web import HttpFetcher

__all__ = ["Fetcher", "FetchError", "FileFetcher", "HttpFetcher"]
