"""Normalize profile payloads from the remote store into fixed models."""

import json
import logging
import math
from typing import Any

from heatpanel.models.common import DayOfWeek, slot_times
from heatpanel.models.profile import HalfHourlyRecord, Profile

logger = logging.getLogger(__name__)

_CANONICAL_SLOTS = slot_times()

# Accepted spellings per field, first match wins
_TIME_KEYS = ("FromTime", "fromTime", "from_time")
_LOW_KEYS = ("TempDemandLow", "LowTemp", "lowTemp", "low_temp")
_HIGH_KEYS = ("TempDemandHigh", "HighTemp", "highTemp", "high_temp")


class ProfileFormatError(ValueError):
    """Raised when a profile payload cannot be mapped onto the fixed models."""


def _pick(raw: dict, keys: tuple[str, ...], what: str) -> Any:
    for k in keys:
        if k in raw and raw[k] is not None:
            return raw[k]
    raise ProfileFormatError(f"Missing {what} (expected one of {', '.join(keys)})")


def _to_float(value: Any, what: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ProfileFormatError(f"{what} is not numeric: {value!r}") from e
    if not math.isfinite(number):
        raise ProfileFormatError(f"{what} is not a finite number: {value!r}")
    return number


def _normalize_time(value: Any) -> str:
    text = str(value).strip()
    try:
        hours, minutes = text.split(":")[:2]
        return f"{int(hours):02d}:{int(minutes):02d}"
    except ValueError as e:
        raise ProfileFormatError(f"Bad slot time: {value!r}") from e


def unwrap_body(data: Any) -> Any:
    """API gateway responses may carry the payload as a JSON string in `body`."""
    if isinstance(data, dict) and isinstance(data.get("body"), str):
        return json.loads(data["body"])
    return data


def normalize_record(raw: dict) -> HalfHourlyRecord:
    return HalfHourlyRecord(
        from_time=_normalize_time(_pick(raw, _TIME_KEYS, "slot time")),
        low_temp=_to_float(_pick(raw, _LOW_KEYS, "low temperature"), "low temperature"),
        high_temp=_to_float(_pick(raw, _HIGH_KEYS, "high temperature"), "high temperature"),
    )


def normalize_records(raw_records: list[dict]) -> tuple[HalfHourlyRecord, ...]:
    records = sorted((normalize_record(r) for r in raw_records), key=lambda r: r.from_time)
    times = [r.from_time for r in records]
    if times != _CANONICAL_SLOTS:
        raise ProfileFormatError(
            f"Expected 48 half-hourly records 00:00..23:30, got {len(records)}"
        )
    return tuple(records)


def _normalize_days(raw_days: Any) -> tuple[DayOfWeek, ...]:
    days: list[DayOfWeek] = []
    for d in raw_days or []:
        try:
            day = DayOfWeek(str(d).strip().capitalize())
        except ValueError as e:
            raise ProfileFormatError(f"Unknown day of week: {d!r}") from e
        if day not in days:
            days.append(day)
    return tuple(days)


def normalize_profile(key: str, raw: dict) -> Profile:
    return Profile(
        profile_key=str(raw.get("ProfileKey") or raw.get("profileKey") or key),
        name=str(raw.get("PriorityName") or raw.get("profileName") or ""),
        priority=int(_to_float(raw.get("PriorityNum", raw.get("priorityNum", 0)), "priority")),
        from_date=str(raw.get("FromDate") or raw.get("fromDate") or ""),
        to_date=str(raw.get("ToDate") or raw.get("toDate") or ""),
        days_of_week=_normalize_days(raw.get("DaysOfWeek", raw.get("activeDays"))),
        records=normalize_records(
            raw.get("HalfHourlyRecords") or raw.get("halfHourlyRecords") or []
        ),
    )


def normalize_profiles(payload: Any) -> dict[str, Profile]:
    """Map a profile-list response onto Profile models keyed by profile key."""
    data = unwrap_body(payload)
    if not isinstance(data, dict):
        raise ProfileFormatError(f"Expected an object of profiles, got {type(data).__name__}")
    profiles: dict[str, Profile] = {}
    for key, raw in data.items():
        profile = normalize_profile(key, raw)
        profiles[profile.profile_key] = profile
    logger.debug("Normalized %d profiles", len(profiles))
    return profiles


def record_to_wire(record: HalfHourlyRecord) -> dict:
    return {
        "FromTime": record.from_time,
        "LowTemp": record.low_temp,
        "HighTemp": record.high_temp,
    }


def build_save_payload(profile: Profile, original_name: str | None) -> dict:
    """Save document for the profile store; `original_name` is None for new profiles."""
    return {
        "profileKey": profile.profile_key,
        "priorityNum": profile.priority,
        "profileName": profile.name,
        "originalProfileName": original_name,
        "fromDate": profile.from_date,
        "toDate": profile.to_date,
        "activeDays": [str(d) for d in profile.days_of_week],
        "halfHourlyRecords": [record_to_wire(r) for r in profile.records],
    }
