"""Slot format check: start and end must be half-hour slot labels."""

from heatpanel.models.common import slot_times
from heatpanel.models.edit import EditCheckResult, EditRule

_SLOTS = frozenset(slot_times())


def check(start_time: str, end_time: str) -> EditCheckResult:
    bad = [t for t in (start_time, end_time) if t not in _SLOTS]
    if bad:
        return EditCheckResult(
            check_name="slot_format",
            passed=False,
            rule=EditRule.SLOT_FORMAT,
            detail=f"Times must be on the half hour (HH:00 or HH:30), got {', '.join(bad)}.",
        )
    return EditCheckResult(
        check_name="slot_format", passed=True, rule=None, detail="ok"
    )
