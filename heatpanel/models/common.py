"""Common types and helpers shared across models."""

from enum import StrEnum
from typing import TypeAlias

ProfileKey: TypeAlias = str

SLOT_MINUTES = 30
SLOTS_PER_DAY = 48
END_OF_DAY = "00:00"


class DayOfWeek(StrEnum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


def slot_times() -> list[str]:
    """The 48 half-hourly slot labels of a day, 00:00 through 23:30."""
    return [
        f"{i // 2:02d}:{(i % 2) * SLOT_MINUTES:02d}" for i in range(SLOTS_PER_DAY)
    ]


def time_to_minutes(value: str) -> int:
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    minutes %= 24 * 60
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
