"""Time order check: start before end, with 00:00 meaning end of day."""

from heatpanel.models.common import END_OF_DAY
from heatpanel.models.edit import EditCheckResult, EditRule


def check(start_time: str, end_time: str) -> EditCheckResult:
    if end_time != END_OF_DAY and start_time >= end_time:
        return EditCheckResult(
            check_name="time_order",
            passed=False,
            rule=EditRule.TIME_ORDER,
            detail="Start time must be before end time.",
        )
    return EditCheckResult(
        check_name="time_order", passed=True, rule=None, detail="ok"
    )
