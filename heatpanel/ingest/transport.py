"""Authenticated JSON transport shared by every remote endpoint client."""

import logging
import os
import time
from collections.abc import Callable
from typing import Any

import httpx

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], str | None]


class TransportError(Exception):
    """Raised when a remote endpoint fails or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def env_token_provider(var_name: str) -> TokenProvider:
    """Token provider reading a bearer token from an environment variable."""

    def _provider() -> str | None:
        return os.environ.get(var_name) or None

    return _provider


def static_token_provider(token: str | None) -> TokenProvider:
    return lambda: token


class AuthenticatedTransport:
    """Sends JSON requests with a bearer token from an injected provider.

    Requests go out without an Authorization header when the provider has no
    token; the endpoint decides whether that is acceptable. GETs are retried
    on 503/429 with exponential backoff.
    """

    def __init__(
        self,
        token_provider: TokenProvider,
        timeout: float = 30.0,
        max_retries: int = 2,
        retry_base_delay: float = 1.0,
    ):
        self.token_provider = token_provider
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Cache-Control": "no-cache"}
        try:
            token = self.token_provider()
        except Exception as e:
            logger.error("Token provider failed, sending unauthenticated: %s", e)
            token = None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def get(self, url: str, params: dict | None = None) -> Any:
        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(
                    url, params=params, headers=self._headers(), timeout=self.timeout
                )
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning("GET %s failed, retrying in %.1fs: %s", url, delay, e)
                    time.sleep(delay)
                    continue
                logger.error("GET %s failed: %s", url, e)
                raise TransportError(f"Request failed: {e}") from e
            if resp.status_code in (503, 429) and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "GET %s returned %d, retrying in %.1fs (attempt %d/%d)",
                    url, resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue
            return self._decode("GET", url, resp)
        raise TransportError(f"GET {url} exhausted retries")

    def post(self, url: str, data: dict) -> Any:
        try:
            resp = httpx.post(url, json=data, headers=self._headers(), timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("POST %s failed: %s", url, e)
            raise TransportError(f"Request failed: {e}") from e
        return self._decode("POST", url, resp)

    @staticmethod
    def _decode(method: str, url: str, resp: httpx.Response) -> Any:
        if resp.status_code >= 400:
            body = resp.text
            logger.error("%s %s -> HTTP %d: %s", method, url, resp.status_code, body)
            raise TransportError(
                f"Status: {resp.status_code}. Body: {body}", resp.status_code
            )
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text
