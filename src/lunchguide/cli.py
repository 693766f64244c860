"""
Command-line entry point.

Downloads the five day listings for one city and week, assembles the week menu
and writes `<out>` plus `<out>.md5`.

    lunchguide --url "http://service.dt.se/lunch/lunch.asp?ort=Falun&vecka={week}" \
        --city Falun --week 32 --out falun.json
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from typing import List, Optional

import structlog

from src.lunchguide.assemble import assemble_week
from src.lunchguide.config import Config, ConfigError, get_config, init_config
from src.lunchguide.fetchers import Fetcher, FileFetcher, HttpFetcher
from src.lunchguide.models import WeekMenu
from src.lunchguide.names import NameResolver, get_name_resolver
from src.lunchguide.serialize import OutputWriteError, write_artifacts

logger = structlog.get_logger(__name__)


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structured logging. DEBUG gets the console renderer, anything else JSON."""
    log_level = log_level.upper()
    renderer = structlog.dev.ConsoleRenderer() if log_level == "DEBUG" else structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level, logging.INFO),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lunchguide",
        description="Build the weekly lunch menu JSON for one city.",
    )
    parser.add_argument("--url", help="URL to the lunch listing ($LUNCHGUIDE_URL); {week} is substituted")
    parser.add_argument("--out", help="Output file ($LUNCHGUIDE_OUT)")
    parser.add_argument("--city", help="Textual representation of the city ($LUNCHGUIDE_CITY)")
    parser.add_argument("--week", type=int, help="Week number to download ($LUNCHGUIDE_WEEK)")
    parser.add_argument("--timeout", type=float, help="Per-day fetch timeout in seconds")
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Fetch the weekdays one after another instead of concurrently",
    )
    parser.add_argument("--names", help="JSON file with extra image reference -> name pairs")
    parser.add_argument("--pages-dir", help="Read saved <Weekday>.html pages instead of fetching")
    parser.add_argument("--log-level", help="Log level (default: $LOG_LEVEL or INFO)")
    return parser


def config_from_args(args: argparse.Namespace, base: Optional[Config] = None) -> Config:
    """Overlay command-line flags on the environment configuration."""
    base = base or get_config()
    overrides = {
        "base_url": args.url,
        "output_path": args.out,
        "city": args.city,
        "week": args.week,
        "fetch_timeout_seconds": args.timeout,
        "name_table_path": args.names,
        "pages_dir": args.pages_dir,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    changes = {k: v for k, v in overrides.items() if v is not None}
    if args.sequential:
        changes["concurrent_days"] = False
    return dataclasses.replace(base, **changes)


def build_fetcher(config: Config) -> Fetcher:
    if config.pages_dir:
        return FileFetcher(config.pages_dir)
    return HttpFetcher(config)


def build_resolver(config: Config) -> NameResolver:
    resolver = get_name_resolver()
    if config.name_table_path:
        resolver = resolver.with_overrides(config.name_table_path)
    return resolver


async def run(
    config: Config,
    fetcher: Optional[Fetcher] = None,
    resolver: Optional[NameResolver] = None,
) -> WeekMenu:
    """Assemble the week and write both artifacts. Raises OutputWriteError."""
    if resolver is None:
        resolver = build_resolver(config)
    async with (fetcher or build_fetcher(config)) as active:
        week = await assemble_week(config, active, resolver)

    write_artifacts(week, config.output_path)
    return week


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = config_from_args(args)
    configure_logging(config.log_level)

    try:
        init_config(config)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2

    try:
        resolver = build_resolver(config)
    except (OSError, ValueError) as e:
        logger.error("Failed to load name table", path=config.name_table_path, error=str(e))
        return 2

    try:
        asyncio.run(run(config, resolver=resolver))
    except OutputWriteError as e:
        logger.error("Failed to write output", error=str(e))
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
