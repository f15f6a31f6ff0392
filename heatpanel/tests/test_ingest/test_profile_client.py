"""Tests for the profile store client."""

import json

import httpx
import pytest
import respx

from heatpanel.ingest.profile_client import ProfileClient
from heatpanel.ingest.transport import AuthenticatedTransport, TransportError, static_token_provider

BASE = "https://test-api.example.com"


@pytest.fixture
def client() -> ProfileClient:
    transport = AuthenticatedTransport(static_token_provider("tok"), retry_base_delay=0.0)
    return ProfileClient(
        transport,
        list_url=f"{BASE}/list",
        save_url=f"{BASE}/save",
        delete_url=f"{BASE}/delete",
        priority_url=f"{BASE}/priority",
    )


class TestProfileClient:
    @respx.mock
    def test_list_profiles(self, client, profiles_payload):
        respx.get(f"{BASE}/list").mock(return_value=httpx.Response(200, json=profiles_payload))
        profiles = client.list_profiles()
        assert len(profiles) == 3
        assert profiles["p-weekend"].records[0].band == (19.0, 22.0)

    @respx.mock
    def test_save_profile(self, client):
        route = respx.post(f"{BASE}/save").mock(return_value=httpx.Response(200, json={}))
        client.save_profile({"profileKey": "k", "profileName": "Weekend"})
        assert json.loads(route.calls.last.request.content)["profileKey"] == "k"

    @respx.mock
    def test_save_failure(self, client):
        respx.post(f"{BASE}/save").mock(return_value=httpx.Response(400, text="bad profile"))
        with pytest.raises(TransportError, match="400"):
            client.save_profile({"profileKey": "k"})

    @respx.mock
    def test_delete_profile(self, client):
        route = respx.post(f"{BASE}/delete").mock(return_value=httpx.Response(200, json={}))
        client.delete_profile("k", "Weekend")
        assert json.loads(route.calls.last.request.content) == {
            "profileKey": "k", "profileName": "Weekend",
        }

    @respx.mock
    def test_update_priorities(self, client):
        route = respx.post(f"{BASE}/priority").mock(return_value=httpx.Response(200, json={}))
        client.update_priorities({"profiles": [{"profileKey": "a", "priorityNum": 1}]})
        assert route.called
