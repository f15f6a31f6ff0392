"""Tests for the address autocomplete client."""

import httpx
import pytest
import respx

from heatpanel.ingest.address_client import AddressClient

BASE = "https://test-address.example.com"


@pytest.fixture
def client() -> AddressClient:
    return AddressClient(api_key="key-1", base_url=BASE)


class TestAutocomplete:
    @respx.mock
    def test_suggestions(self, client):
        respx.get(f"{BASE}/autocomplete/SW1A2AA", params={"api-key": "key-1"}).mock(
            return_value=httpx.Response(200, json={
                "suggestions": [
                    {"address": "10 Downing Street, London", "id": "a1"},
                    {"id": "no-address"},
                ]
            })
        )
        assert client.autocomplete("SW1A2AA") == ["10 Downing Street, London"]

    def test_short_term_skips_request(self, client):
        assert client.autocomplete("SW") == []

    @respx.mock
    def test_api_error_yields_empty(self, client):
        respx.get(f"{BASE}/autocomplete/SW1A2AA").mock(return_value=httpx.Response(401))
        assert client.autocomplete("SW1A2AA") == []

    @respx.mock
    def test_slash_in_term_is_escaped(self, client):
        route = respx.get(url__startswith=f"{BASE}/autocomplete/").mock(
            return_value=httpx.Response(200, json={"suggestions": []})
        )
        assert client.autocomplete("Flat 1/2 High St") == []
        raw_path = route.calls.last.request.url.raw_path
        assert raw_path.startswith(b"/autocomplete/Flat%201%2F2%20High%20St?")
