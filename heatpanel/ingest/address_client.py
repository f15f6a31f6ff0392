"""getAddress.io autocomplete client for property registration."""

import logging
import os
from urllib.parse import quote

import httpx

from heatpanel.config import defaults

logger = logging.getLogger(__name__)


class AddressClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = defaults.ADDRESS_BASE_URL,
        timeout: float = 10.0,
        min_term_length: int = 3,
    ):
        self.api_key = api_key or os.environ.get("GETADDRESS_API_KEY", "")
        self.base_url = base_url
        self.timeout = timeout
        self.min_term_length = min_term_length

    def autocomplete(self, term: str) -> list[str]:
        """Suggested addresses for a partial address. Failures yield []."""
        term = term.strip()
        if len(term) < self.min_term_length:
            return []
        url = f"{self.base_url}/autocomplete/{quote(term, safe='')}"
        try:
            resp = httpx.get(url, params={"api-key": self.api_key}, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPStatusError, httpx.RequestError, ValueError) as e:
            logger.warning("Address lookup failed for %r: %s", term, e)
            return []
        return [s["address"] for s in data.get("suggestions", []) if s.get("address")]
