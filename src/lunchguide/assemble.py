"""
Week assembly.

Each weekday runs as its own task: fetch -> segment -> extract -> resolve. A day
that cannot be fetched or parsed still gets its slot, with no restaurants, so
the week always has five days. Tasks share nothing but the read-only name
resolver; results are placed by index once all of them have finished.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional, Union

import structlog

from src.lunchguide.config import Config
from src.lunchguide.extract import extract_fields
from src.lunchguide.fetchers.base import Fetcher, FetchError
from src.lunchguide.models import DAYS_PER_WEEK, WEEKDAYS, DayMenu, RestaurantEntry, WeekMenu
from src.lunchguide.names import NameResolver, get_name_resolver
from src.lunchguide.segment import split_segments

logger = structlog.get_logger(__name__)


def empty_day_menu(day_index: int) -> DayMenu:
    return DayMenu.empty(day_index)


def build_day_menu(
    day_index: int,
    document: Union[bytes, str],
    resolver: Optional[NameResolver] = None,
    *,
    encoding: str = "utf-8",
) -> DayMenu:
    """
    Turn one day's raw listing into a DayMenu.

    Segments missing their logo or menu cell are skipped with a warning; the
    remaining segments are still processed.
    """
    if resolver is None:
        resolver = get_name_resolver()
    weekday_name = WEEKDAYS[day_index]

    restaurants: List[RestaurantEntry] = []
    segments = split_segments(document, encoding=encoding)
    for position, segment in enumerate(segments):
        result = extract_fields(segment)
        if not result.success or result.fields is None:
            logger.warning(
                "Skipping restaurant segment",
                weekday=weekday_name,
                segment=position,
                error=result.error,
            )
            continue

        fields = result.fields
        restaurants.append(
            RestaurantEntry(
                name=resolver.resolve(fields.image_reference),
                image_reference=fields.image_reference,
                description=fields.description,
                menu_text=fields.menu_text,
            )
        )

    logger.debug(
        "Day parsed",
        weekday=weekday_name,
        segments=len(segments),
        restaurants=len(restaurants),
    )
    return DayMenu(day_index=day_index, weekday_name=weekday_name, restaurants=restaurants)


async def process_day(
    day_index: int,
    fetcher: Fetcher,
    resolver: NameResolver,
    config: Config,
) -> DayMenu:
    """Fetch and parse one day. Never raises; failures give an empty day."""
    weekday_name = WEEKDAYS[day_index]

    try:
        document = await asyncio.wait_for(
            fetcher.fetch(weekday_name),
            timeout=config.fetch_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.error(
            "Day fetch timed out",
            weekday=weekday_name,
            timeout_s=config.fetch_timeout_seconds,
        )
        return empty_day_menu(day_index)
    except FetchError as e:
        logger.error("Day fetch failed", weekday=weekday_name, error=str(e))
        return empty_day_menu(day_index)
    except Exception as e:
        logger.error("Fetcher raised unexpectedly", weekday=weekday_name, error=repr(e))
        return empty_day_menu(day_index)

    try:
        return build_day_menu(day_index, document, resolver, encoding=config.source_encoding)
    except Exception as e:
        logger.error("Failed to parse day listing", weekday=weekday_name, error=str(e))
        return empty_day_menu(day_index)


async def assemble_week(
    config: Config,
    fetcher: Fetcher,
    resolver: Optional[NameResolver] = None,
) -> WeekMenu:
    """
    Build the WeekMenu for `config.city` / `config.week`.

    Days run concurrently unless `config.concurrent_days` is off. A day task
    that is cancelled or crashes leaves its slot empty; finished days are kept.
    """
    if resolver is None:
        resolver = get_name_resolver()

    logger.info(
        "Assembling week",
        city=config.city,
        week=config.week,
        concurrent=config.concurrent_days,
    )

    if config.concurrent_days:
        results = await asyncio.gather(
            *(process_day(i, fetcher, resolver, config) for i in range(DAYS_PER_WEEK)),
            return_exceptions=True,
        )
    else:
        results = [await process_day(i, fetcher, resolver, config) for i in range(DAYS_PER_WEEK)]

    days: List[DayMenu] = []
    for i, result in enumerate(results):
        if isinstance(result, DayMenu):
            days.append(result)
        else:
            logger.error("Day task did not finish", weekday=WEEKDAYS[i], error=repr(result))
            days.append(empty_day_menu(i))

    week = WeekMenu(city=config.city, week_number=config.week, days=tuple(days))

    unresolved = sorted(
        {r.image_reference for day in week.days for r in day.restaurants if not r.resolved}
    )
    if unresolved:
        logger.warning(
            "Week has restaurants without a known name",
            count=len(unresolved),
            image_references=unresolved,
        )

    logger.info(
        "Week assembled",
        city=week.city,
        week=week.week_number,
        restaurants=week.restaurant_count,
        empty_days=[d.weekday_name for d in week.days if not d.restaurants],
    )
    return week
