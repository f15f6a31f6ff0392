"""Client for the live status and boost endpoints."""

import logging

from heatpanel.config import defaults
from heatpanel.ingest.transport import AuthenticatedTransport, TransportError
from heatpanel.models.status import BoostType, DashboardStatus

logger = logging.getLogger(__name__)


def _num(value, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def parse_status(content: dict) -> DashboardStatus:
    boost = content.get("boosttype") or BoostType.NONE
    try:
        boost_type = BoostType(boost)
    except ValueError:
        logger.warning("Unknown boost type %r, treating as none", boost)
        boost_type = BoostType.NONE
    return DashboardStatus(
        user_name=content.get("name") or "User",
        gas_cost=_num(content.get("gascost")),
        actual_cost=_num(content.get("actcost")),
        room_temperature=_num(content.get("roomtemp")),
        water_temperature=_num(content.get("watertemp")),
        running_status=str(content.get("currrunning", "")),
        demand_low=_num(content.get("destemplow")),
        demand_high=_num(content.get("destemphigh")),
        boost_type=boost_type,
        water_volume=_num(content.get("watervol")),
        tank_capacity=_num(content.get("tankcapacity")),
    )


def next_boost_command(current: BoostType, requested: BoostType) -> BoostType:
    """Requesting the boost that is already running cancels it."""
    return BoostType.CANCEL if current == requested else requested


class StatusClient:
    def __init__(
        self,
        transport: AuthenticatedTransport,
        status_url: str = defaults.STATUS_URL,
        boost_url: str = defaults.BOOST_URL,
    ):
        self.transport = transport
        self.status_url = status_url
        self.boost_url = boost_url

    def get_status(self) -> DashboardStatus:
        data = self.transport.get(self.status_url)
        content = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content, list) or not content:
            raise TransportError("API returned no content.")
        return parse_status(content[0])

    def set_boost(self, command: BoostType) -> None:
        """Send a boost command. The user and premise come from the token."""
        self.transport.post(self.boost_url, {"heatwater": str(command)})

    def toggle_boost(self, current: BoostType, requested: BoostType) -> BoostType:
        """Start `requested` or cancel it if already active. Returns the new state."""
        if requested not in (BoostType.HEATING, BoostType.WATER):
            raise ValueError(f"Cannot request boost type {requested!r}")
        command = next_boost_command(current, requested)
        self.set_boost(command)
        new_state = BoostType.NONE if command == BoostType.CANCEL else command
        logger.info("Boost %s -> %s", current, new_state)
        return new_state
