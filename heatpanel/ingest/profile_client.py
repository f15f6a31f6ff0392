"""Client for the temperature profile store endpoints."""

import logging

from heatpanel.config import defaults
from heatpanel.ingest.profile_adapter import normalize_profiles
from heatpanel.ingest.transport import AuthenticatedTransport
from heatpanel.models.profile import Profile

logger = logging.getLogger(__name__)


class ProfileClient:
    def __init__(
        self,
        transport: AuthenticatedTransport,
        list_url: str = defaults.PROFILE_LIST_URL,
        save_url: str = defaults.PROFILE_SAVE_URL,
        delete_url: str = defaults.PROFILE_DELETE_URL,
        priority_url: str = defaults.PRIORITY_UPDATE_URL,
    ):
        self.transport = transport
        self.list_url = list_url
        self.save_url = save_url
        self.delete_url = delete_url
        self.priority_url = priority_url

    def list_profiles(self) -> dict[str, Profile]:
        """Fetch all profiles, normalized and keyed by profile key."""
        return normalize_profiles(self.transport.get(self.list_url))

    def save_profile(self, payload: dict) -> None:
        self.transport.post(self.save_url, payload)
        logger.info("Saved profile %s", payload.get("profileName"))

    def delete_profile(self, profile_key: str, profile_name: str) -> None:
        self.transport.post(
            self.delete_url, {"profileKey": profile_key, "profileName": profile_name}
        )
        logger.info("Deleted profile %s", profile_name)

    def update_priorities(self, payload: dict) -> None:
        self.transport.post(self.priority_url, payload)
        logger.info("Updated priorities for %d profiles", len(payload.get("profiles", [])))
