"""Validate chunk edits and reapply them onto the half-hourly records."""

import logging
from collections.abc import Sequence
from dataclasses import replace

from heatpanel.models.common import END_OF_DAY
from heatpanel.models.edit import ChunkEdit, ChunkEditError, EditCheckResult, EditVerdict
from heatpanel.models.profile import HalfHourlyRecord
from heatpanel.schedule.checks import band_width, slot_format, time_order

logger = logging.getLogger(__name__)

DEFAULT_MIN_BAND_WIDTH = 1.0


def validate_edit(edit: ChunkEdit, min_band_width: float = DEFAULT_MIN_BAND_WIDTH) -> EditVerdict:
    """Run every edit check. Never short-circuits, so all failures are reported."""
    checks: list[EditCheckResult] = [
        slot_format.check(edit.start_time, edit.end_time),
        time_order.check(edit.start_time, edit.end_time),
        band_width.check(edit.low_temp, edit.high_temp, min_band_width),
    ]
    approved = all(c.passed for c in checks)
    return EditVerdict(approved=approved, checks=checks)


def in_edit_range(from_time: str, edit: ChunkEdit) -> bool:
    """True if a slot starting at `from_time` falls in [start, end)."""
    if from_time < edit.start_time:
        return False
    return edit.end_time == END_OF_DAY or from_time < edit.end_time


def apply_edit(
    records: Sequence[HalfHourlyRecord],
    edit: ChunkEdit,
    min_band_width: float = DEFAULT_MIN_BAND_WIDTH,
) -> list[HalfHourlyRecord]:
    """Return a new record list with the edit's band over its time range.

    Raises ChunkEditError with the first failed rule; the input is untouched.
    """
    verdict = validate_edit(edit, min_band_width)
    failure = verdict.first_failure
    if failure is not None:
        assert failure.rule is not None
        logger.info(
            "Rejected chunk edit %s-%s (%s): %s",
            edit.start_time, edit.end_time, failure.rule, failure.detail,
        )
        raise ChunkEditError(failure.rule, failure.detail)

    low, high = float(edit.low_temp), float(edit.high_temp)
    return [
        replace(r, low_temp=low, high_temp=high) if in_edit_range(r.from_time, edit) else r
        for r in records
    ]
