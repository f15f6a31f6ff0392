"""Temperature profile models: half-hourly records and derived chunks."""

from dataclasses import dataclass

from heatpanel.models.common import (
    SLOT_MINUTES,
    DayOfWeek,
    ProfileKey,
    minutes_to_time,
    slot_times,
    time_to_minutes,
)


@dataclass(frozen=True)
class HalfHourlyRecord:
    from_time: str  # HH:MM, start of a 30-minute slot
    low_temp: float
    high_temp: float

    @property
    def band(self) -> tuple[float, float]:
        return (self.low_temp, self.high_temp)


@dataclass(frozen=True)
class Chunk:
    """A maximal run of consecutive records sharing one temperature band.

    `end_time` is the start of the run's last slot, not the end of it.
    """

    index: int
    start_time: str
    end_time: str
    low_temp: float
    high_temp: float
    start_index: int
    end_index: int
    is_first: bool
    is_last: bool

    @property
    def slot_count(self) -> int:
        return self.end_index - self.start_index + 1

    @property
    def end_of_period(self) -> str:
        """Time the last slot finishes; 00:00 for a run reaching midnight."""
        return minutes_to_time(time_to_minutes(self.end_time) + SLOT_MINUTES)

    @property
    def band(self) -> tuple[float, float]:
        return (self.low_temp, self.high_temp)


@dataclass(frozen=True)
class TemperatureBounds:
    min_temp: float
    max_temp: float


@dataclass(frozen=True)
class Profile:
    profile_key: ProfileKey
    name: str
    priority: int
    from_date: str  # YYYY-MM-DD
    to_date: str  # YYYY-MM-DD
    days_of_week: tuple[DayOfWeek, ...]
    records: tuple[HalfHourlyRecord, ...]

    @property
    def is_default(self) -> bool:
        return "Default" in self.name


def default_day(low_temp: float = 18.0, high_temp: float = 21.0) -> list[HalfHourlyRecord]:
    """A uniform day at one band, used to seed new profiles."""
    return [HalfHourlyRecord(t, low_temp, high_temp) for t in slot_times()]
