"""Tests for profile and status models."""

from heatpanel.models.common import minutes_to_time, slot_times, time_to_minutes
from heatpanel.models.profile import Chunk, Profile, default_day
from heatpanel.models.status import BoostType, DashboardStatus


class TestSlots:
    def test_48_sorted_slots(self):
        slots = slot_times()
        assert len(slots) == 48
        assert slots[0] == "00:00"
        assert slots[1] == "00:30"
        assert slots[-1] == "23:30"
        assert slots == sorted(slots)

    def test_minute_conversion(self):
        assert time_to_minutes("08:30") == 510
        assert minutes_to_time(510) == "08:30"
        assert minutes_to_time(24 * 60) == "00:00"


class TestChunk:
    def test_end_of_period(self):
        c = Chunk(1, "08:00", "16:30", 19, 23, 16, 33, False, False)
        assert c.end_of_period == "17:00"
        assert c.slot_count == 18


class TestProfile:
    def test_default_detection(self):
        p = Profile("k", "Default Profile", 0, "", "", (), tuple(default_day()))
        assert p.is_default is True
        assert Profile("k", "Weekend", 1, "", "", (), ()).is_default is False


def _status(**overrides) -> DashboardStatus:
    values = dict(
        user_name="Sam", gas_cost=12.5, actual_cost=9.25, room_temperature=20.4,
        water_temperature=48.0, running_status="Heating", demand_low=18.0,
        demand_high=21.0, boost_type=BoostType.NONE, water_volume=60.0,
        tank_capacity=120.0,
    )
    values.update(overrides)
    return DashboardStatus(**values)


class TestDashboardStatus:
    def test_weekly_savings(self):
        assert _status().weekly_savings == 3.25

    def test_tank_fullness(self):
        assert _status().tank_fullness_pct == 50.0
        assert _status(tank_capacity=0).tank_fullness_pct == 0.0

    def test_tank_status_text(self):
        assert "empty" in _status(water_volume=30, tank_capacity=100).tank_status_text
        assert "half full" in _status(water_volume=69, tank_capacity=100).tank_status_text
        assert "a full" in _status(water_volume=70, tank_capacity=100).tank_status_text
