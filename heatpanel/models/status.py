"""Live heating and hot-water status models."""

from dataclasses import dataclass
from enum import StrEnum


class BoostType(StrEnum):
    HEATING = "H"
    WATER = "W"
    NONE = "N"
    CANCEL = "C"  # command only, never reported as a state


@dataclass(frozen=True)
class DashboardStatus:
    user_name: str
    gas_cost: float
    actual_cost: float
    room_temperature: float
    water_temperature: float
    running_status: str
    demand_low: float
    demand_high: float
    boost_type: BoostType
    water_volume: float
    tank_capacity: float

    @property
    def weekly_savings(self) -> float:
        return self.gas_cost - self.actual_cost

    @property
    def tank_fullness_pct(self) -> float:
        if self.tank_capacity <= 0:
            return 0.0
        return self.water_volume / self.tank_capacity * 100

    @property
    def tank_status_text(self) -> str:
        pct = self.tank_fullness_pct
        if pct <= 30:
            return "You have an empty Tank of Hot Water"
        if pct <= 69:
            return "You have a half full Tank of Hot Water"
        return "You have a full Tank of Hot Water"
