"""Shared test fixtures."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from heatpanel.config.schema import PanelConfig
from heatpanel.models.common import slot_times
from heatpanel.models.profile import HalfHourlyRecord, default_day

SpanBuilder = Callable[..., list[HalfHourlyRecord]]


@pytest.fixture
def uniform_day() -> list[HalfHourlyRecord]:
    """48 slots at (18, 21): a single chunk."""
    return default_day(18.0, 21.0)


@pytest.fixture
def build_day() -> SpanBuilder:
    """Build a day from (start, band) spans; each band runs until the next start.

    build_day(("00:00", (18, 21)), ("08:00", (19, 23)), ("17:00", (18, 21)))
    """

    def _build(*spans: tuple[str, tuple[float, float]]) -> list[HalfHourlyRecord]:
        records = []
        for t in slot_times():
            band = [b for start, b in spans if start <= t][-1]
            records.append(HalfHourlyRecord(t, float(band[0]), float(band[1])))
        return records

    return _build


@pytest.fixture
def workday(build_day: SpanBuilder) -> list[HalfHourlyRecord]:
    """Three chunks: night (18,21), day (19,23) 08:00-17:00, evening (18,21)."""
    return build_day(("00:00", (18, 21)), ("08:00", (19, 23)), ("17:00", (18, 21)))


def wire_records(low: float = 18, high: float = 21) -> list[dict]:
    return [
        {"FromTime": t, "TempDemandLow": str(low), "TempDemandHigh": str(high)}
        for t in slot_times()
    ]


@pytest.fixture
def profiles_payload() -> dict:
    """Profile-list response as the store sends it: wrapped in a JSON `body`."""
    data = {
        "p-default": {
            "ProfileKey": "p-default",
            "PriorityName": "Default Profile",
            "PriorityNum": "0",
            "FromDate": "2026-01-01",
            "ToDate": "2099-12-31",
            "DaysOfWeek": [],
            "HalfHourlyRecords": wire_records(17, 20),
        },
        "p-week": {
            "ProfileKey": "p-week",
            "PriorityName": "Weekdays",
            "PriorityNum": "2",
            "FromDate": "2026-01-01",
            "ToDate": "2026-12-31",
            "DaysOfWeek": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"],
            "HalfHourlyRecords": wire_records(18, 21),
        },
        "p-weekend": {
            "ProfileKey": "p-weekend",
            "PriorityName": "Weekend",
            "PriorityNum": "1",
            "FromDate": "2026-01-01",
            "ToDate": "2026-12-31",
            "DaysOfWeek": ["Saturday", "Sunday"],
            "HalfHourlyRecords": wire_records(19, 22),
        },
    }
    return {"statusCode": 200, "body": json.dumps(data)}


@pytest.fixture
def status_payload() -> dict:
    return {
        "content": [
            {
                "name": "Sam",
                "gascost": "12.50",
                "actcost": "9.25",
                "roomtemp": "20.4",
                "watertemp": "48.0",
                "currrunning": "Heating",
                "destemplow": "18",
                "destemphigh": "21",
                "boosttype": "N",
                "watervol": "60",
                "tankcapacity": "120",
            }
        ]
    }


@pytest.fixture
def default_config() -> PanelConfig:
    return PanelConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"timeout_seconds": 5.0, "retry_base_delay": 0.0},
        "editor": {"min_band_width": 1.0},
    }
    path = tmp_path / "heatpanel.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def wire_day() -> list[dict]:
    """A uniform day in the store's wire format."""
    return wire_records(18, 21)
