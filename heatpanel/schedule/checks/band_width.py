"""Band width check: high must exceed low by at least the minimum gap."""

import math

from heatpanel.models.edit import EditCheckResult, EditRule


def check(low_temp: float, high_temp: float, min_band_width: float) -> EditCheckResult:
    finite = math.isfinite(low_temp) and math.isfinite(high_temp)
    # Rounded so 19.9 -> 20.9 counts as a full degree
    if not finite or not round(high_temp - low_temp, 6) >= min_band_width:
        return EditCheckResult(
            check_name="band_width",
            passed=False,
            rule=EditRule.BAND_WIDTH,
            detail=f"Max temp must be at least {min_band_width:g} degree higher than min.",
        )
    return EditCheckResult(
        check_name="band_width", passed=True, rule=None, detail="ok"
    )
