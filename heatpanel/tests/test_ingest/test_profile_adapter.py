"""Tests for normalizing profile payloads at the store boundary."""

import json

import pytest

from heatpanel.ingest.profile_adapter import (
    ProfileFormatError,
    build_save_payload,
    normalize_profiles,
    normalize_record,
    normalize_records,
    unwrap_body,
)
from heatpanel.models.common import DayOfWeek


class TestUnwrapBody:
    def test_string_body(self):
        assert unwrap_body({"body": json.dumps({"a": 1})}) == {"a": 1}

    def test_plain(self):
        assert unwrap_body({"a": 1}) == {"a": 1}


class TestNormalizeRecord:
    def test_wire_names(self):
        r = normalize_record({"FromTime": "8:00", "TempDemandLow": "18.5", "TempDemandHigh": 21})
        assert r.from_time == "08:00"
        assert r.band == (18.5, 21.0)

    def test_internal_names(self):
        r = normalize_record({"fromTime": "23:30:00", "lowTemp": 17, "highTemp": 19})
        assert r.from_time == "23:30"
        assert r.band == (17.0, 19.0)

    def test_missing_field(self):
        with pytest.raises(ProfileFormatError, match="low temperature"):
            normalize_record({"FromTime": "00:00", "TempDemandHigh": 21})

    def test_non_numeric(self):
        with pytest.raises(ProfileFormatError, match="not numeric"):
            normalize_record({"FromTime": "00:00", "LowTemp": "warm", "HighTemp": 21})

    @pytest.mark.parametrize("value", ["nan", "inf", "-Infinity"])
    def test_non_finite(self, value):
        with pytest.raises(ProfileFormatError, match="not a finite number"):
            normalize_record({"FromTime": "00:00", "LowTemp": value, "HighTemp": 21})


class TestNormalizeRecords:
    def test_sorted(self, wire_day):
        records = normalize_records(list(reversed(wire_day)))
        assert records[0].from_time == "00:00"
        assert records[-1].from_time == "23:30"

    def test_wrong_count(self, wire_day):
        with pytest.raises(ProfileFormatError, match="48"):
            normalize_records(wire_day[:47])

    def test_duplicate_slot(self, wire_day):
        wire_day[1] = dict(wire_day[0])
        with pytest.raises(ProfileFormatError):
            normalize_records(wire_day)


class TestNormalizeProfiles:
    def test_wrapped_payload(self, profiles_payload):
        profiles = normalize_profiles(profiles_payload)
        assert set(profiles) == {"p-default", "p-week", "p-weekend"}
        week = profiles["p-week"]
        assert week.name == "Weekdays"
        assert week.priority == 2
        assert week.days_of_week[0] == DayOfWeek.MONDAY
        assert len(week.records) == 48
        assert profiles["p-default"].is_default

    def test_unknown_day(self, profiles_payload):
        data = json.loads(profiles_payload["body"])
        data["p-week"]["DaysOfWeek"] = ["Funday"]
        with pytest.raises(ProfileFormatError, match="Funday"):
            normalize_profiles(data)

    def test_not_an_object(self):
        with pytest.raises(ProfileFormatError):
            normalize_profiles([1, 2, 3])


class TestBuildSavePayload:
    def test_round_trip_through_adapter(self, profiles_payload):
        profile = normalize_profiles(profiles_payload)["p-weekend"]
        payload = build_save_payload(profile, "Weekend")
        assert payload["activeDays"] == ["Saturday", "Sunday"]
        assert payload["originalProfileName"] == "Weekend"
        assert normalize_records(payload["halfHourlyRecords"]) == profile.records
