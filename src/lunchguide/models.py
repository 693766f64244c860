"""
Week menu data model.

A `WeekMenu` always holds exactly five `DayMenu` slots (Monday to Friday), even
when a day could not be fetched or parsed. `to_dict()` produces the JSON shape
written to disk; `from_dict()` reads it back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

WEEKDAYS: Tuple[str, ...] = ("Mandag", "Tisdag", "Onsdag", "Torsdag", "Fredag")
DAYS_PER_WEEK = len(WEEKDAYS)


@dataclass(frozen=True)
class RestaurantEntry:
    name: str
    image_reference: str
    description: str = ""
    menu_text: str = ""

    @property
    def resolved(self) -> bool:
        return bool(self.name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "imageReference": self.image_reference,
            "description": self.description,
            "menuText": self.menu_text,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RestaurantEntry":
        return cls(
            name=data.get("name", ""),
            image_reference=data.get("imageReference", ""),
            description=data.get("description", ""),
            menu_text=data.get("menuText", ""),
        )


@dataclass(frozen=True)
class DayMenu:
    day_index: int
    weekday_name: str
    restaurants: Tuple[RestaurantEntry, ...] = ()

    def __post_init__(self) -> None:
        if not 0 <= self.day_index < DAYS_PER_WEEK:
            raise ValueError(f"day_index must be 0-{DAYS_PER_WEEK - 1}, got {self.day_index}")
        # Accept any iterable of entries but always store a tuple.
        object.__setattr__(self, "restaurants", tuple(self.restaurants))

    @classmethod
    def empty(cls, day_index: int) -> "DayMenu":
        return cls(day_index=day_index, weekday_name=WEEKDAYS[day_index])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dayIndex": self.day_index,
            "weekdayName": self.weekday_name,
            "restaurants": [r.to_dict() for r in self.restaurants],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DayMenu":
        return cls(
            day_index=int(data["dayIndex"]),
            weekday_name=data.get("weekdayName", ""),
            restaurants=tuple(RestaurantEntry.from_dict(r) for r in data.get("restaurants") or []),
        )


@dataclass(frozen=True)
class WeekMenu:
    city: str
    week_number: int
    days: Tuple[DayMenu, ...]

    def __post_init__(self) -> None:
        days = tuple(self.days)
        if len(days) != DAYS_PER_WEEK:
            raise ValueError(f"A week holds exactly {DAYS_PER_WEEK} days, got {len(days)}")
        for position, day in enumerate(days):
            if day.day_index != position:
                raise ValueError(f"Day at position {position} has day_index {day.day_index}")
        object.__setattr__(self, "days", days)

    @classmethod
    def empty(cls, city: str, week_number: int) -> "WeekMenu":
        return cls(
            city=city,
            week_number=week_number,
            days=tuple(DayMenu.empty(i) for i in range(DAYS_PER_WEEK)),
        )

    @property
    def restaurant_count(self) -> int:
        return sum(len(day.restaurants) for day in self.days)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "city": self.city,
            "weekNumber": self.week_number,
            "days": [d.to_dict() for d in self.days],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeekMenu":
        return cls(
            city=data.get("city", ""),
            week_number=int(data.get("weekNumber", 0)),
            days=tuple(DayMenu.from_dict(d) for d in data.get("days") or []),
        )
