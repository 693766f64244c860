"""
Configuration management for the Lunchguide weekly menu builder.

Loads environment variables and provides a strongly-typed configuration object.
Command-line flags override individual fields via `dataclasses.replace`, so the
value handed to the pipeline is built once and never mutated afterwards.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
import structlog

load_dotenv()

logger = structlog.get_logger(__name__)


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""
    pass


@dataclass(frozen=True)
class Config:
    """Strongly-typed configuration object."""

    # Source
    base_url: str = ""
    city: str = ""
    week: int = 0
    source_encoding: str = "utf-8"
    user_agent: str = "lunchguide/1.0"

    # Optional directory of saved `<Weekday>.html` pages, used instead of HTTP
    pages_dir: str = ""

    # Output
    output_path: str = ""

    # Fetching
    fetch_timeout_seconds: float = 30.0
    concurrent_days: bool = True

    # Name table extension (JSON object of image reference -> name)
    name_table_path: str = ""

    log_level: str = "INFO"

    def day_url(self, weekday_name: str) -> str:
        """Build the URL for one weekday's listing."""
        base = self.base_url.replace("{week}", str(self.week))
        return f"{base}&veckodag={weekday_name}"

    def validate(self) -> None:
        """Validate that all required configuration is present."""
        missing = []

        if not self.base_url and not self.pages_dir:
            missing.append("LUNCHGUIDE_URL")
        if not self.output_path:
            missing.append("LUNCHGUIDE_OUT")
        if not self.city:
            missing.append("LUNCHGUIDE_CITY")
        if not self.week:
            missing.append("LUNCHGUIDE_WEEK")

        if missing:
            raise ConfigError(
                f"Missing required settings: {', '.join(missing)}\n"
                "Pass them as command-line flags or set them in your .env file."
            )

        if not 1 <= self.week <= 53:
            raise ConfigError(f"Invalid week number {self.week}. Expected 1-53.")

        if self.fetch_timeout_seconds <= 0:
            raise ConfigError(
                f"Invalid FETCH_TIMEOUT_SECONDS '{self.fetch_timeout_seconds}'. Expected > 0."
            )

    def log_config(self) -> None:
        """Log configuration."""
        logger.info(
            "Configuration loaded",
            base_url=self.base_url or None,
            pages_dir=self.pages_dir or None,
            city=self.city,
            week=self.week,
            output_path=self.output_path,
            fetch_timeout_seconds=self.fetch_timeout_seconds,
            concurrent_days=self.concurrent_days,
            source_encoding=self.source_encoding,
            name_table_path=self.name_table_path or None,
            log_level=self.log_level,
        )


def _get_bool(key: str, default: bool = False) -> bool:
    """Get a boolean from environment variable."""
    value = os.getenv(key, str(default)).lower()
    return value in ("true", "1", "yes", "on")


def _get_int(key: str, default: int) -> int:
    """Get an integer from environment variable."""
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


def _get_float(key: str, default: float) -> float:
    """Get a float from environment variable."""
    try:
        return float(os.getenv(key, str(default)))
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_config() -> Config:
    """
    Get the application configuration from the environment.

    Uses lru_cache to ensure we only load config once.
    """
    return Config(
        # Source
        base_url=os.getenv("LUNCHGUIDE_URL", ""),
        city=os.getenv("LUNCHGUIDE_CITY", ""),
        week=_get_int("LUNCHGUIDE_WEEK", 0),
        source_encoding=os.getenv("SOURCE_ENCODING", "utf-8"),
        user_agent=os.getenv("USER_AGENT", "lunchguide/1.0"),
        pages_dir=os.getenv("LUNCHGUIDE_PAGES_DIR", ""),

        # Output
        output_path=os.getenv("LUNCHGUIDE_OUT", ""),

        # Fetching
        fetch_timeout_seconds=_get_float("FETCH_TIMEOUT_SECONDS", 30.0),
        concurrent_days=_get_bool("CONCURRENT_DAYS", True),

        name_table_path=os.getenv("NAME_TABLE_PATH", ""),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def init_config(config: Optional[Config] = None) -> Config:
    """
    Validate and log a configuration.

    Call this at startup to fail fast if config is invalid.
    """
    config = config or get_config()
    config.validate()
    config.log_config()
    return config
