"""Chunk edit request and validation result models."""

from dataclasses import dataclass
from enum import StrEnum

from heatpanel.models.profile import HalfHourlyRecord


class EditRule(StrEnum):
    SLOT_FORMAT = "SLOT_FORMAT"
    TIME_ORDER = "TIME_ORDER"
    BAND_WIDTH = "BAND_WIDTH"


@dataclass(frozen=True)
class ChunkEdit:
    start_time: str
    end_time: str  # exclusive; 00:00 means through the end of the day
    low_temp: float
    high_temp: float
    chunk_index: int | None = None  # None for a new period

    @property
    def is_new(self) -> bool:
        return self.chunk_index is None


@dataclass(frozen=True)
class EditCheckResult:
    check_name: str
    passed: bool
    rule: EditRule | None
    detail: str


@dataclass(frozen=True)
class EditVerdict:
    approved: bool
    checks: list[EditCheckResult]

    @property
    def failed_rules(self) -> list[EditRule]:
        return [c.rule for c in self.checks if c.rule is not None]

    @property
    def first_failure(self) -> EditCheckResult | None:
        for c in self.checks:
            if not c.passed:
                return c
        return None


class ChunkEditError(ValueError):
    """Raised when a proposed chunk edit fails validation. Nothing is mutated."""

    def __init__(self, rule: EditRule, message: str):
        super().__init__(message)
        self.rule = rule
        self.message = message


@dataclass(frozen=True)
class DeleteResult:
    records: list[HalfHourlyRecord]
    changed: bool
