"""HTTP client for the Forkable admin API.

Stateless apart from the underlying ``requests.Session``: every call receives
the credentials or session token it needs.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Optional, Sequence

import requests

from ..core.constants import (
    DEFAULT_UPSTREAM_TIMEOUT_SECONDS,
    FORKABLE_BASE_URL,
    FORKABLE_DELIVERIES_PATH,
    FORKABLE_GRAPHQL_PATH,
    FORKABLE_SESSION_COOKIE_NAME,
)
from ..core.exceptions import (
    UpstreamAuthError,
    UpstreamHttpError,
    UpstreamProtocolError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)

LOGIN_MUTATION = (
    "mutation ($input: CreateSessionInput!) "
    "{ createSession (input: $input) { errorAttributes user { id email } } }"
)

_SESSION_COOKIE_RE = re.compile(re.escape(FORKABLE_SESSION_COOKIE_NAME) + r"=[^;,\s]+")


class ForkableClient:
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        base_url: str = FORKABLE_BASE_URL,
        timeout: float = DEFAULT_UPSTREAM_TIMEOUT_SECONDS,
    ):
        self._session = session or requests.Session()
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def _post(self, path: str, *, payload: dict, headers: Optional[dict] = None):
        url = f"{self._base_url}{path}"
        request_headers = {"Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)

        try:
            response = self._session.post(url, json=payload, headers=request_headers, timeout=self._timeout)
        except requests.exceptions.RequestException as e:
            logger.error("Connection error calling %s: %s", url, e)
            raise UpstreamTransportError(f"Could not reach Forkable: {e}") from e

        if not response.ok:
            logger.warning("Forkable answered %s for %s", response.status_code, url)
        return response

    def login(self, email: str, password: str) -> str:
        """Create an upstream session and return its ``name=value`` cookie pair."""
        payload = {
            "query": LOGIN_MUTATION,
            "variables": {"input": {"email": email, "password": password}},
        }
        response = self._post(FORKABLE_GRAPHQL_PATH, payload=payload)

        if response.status_code in (401, 403):
            raise UpstreamAuthError(
                f"Forkable login rejected: {response.status_code}", status_code=response.status_code
            )
        if not response.ok:
            raise UpstreamHttpError(f"Forkable login failed: {response.status_code}", status_code=response.status_code)

        set_cookie = response.headers.get("set-cookie")
        if not set_cookie:
            raise UpstreamProtocolError("Missing set-cookie header")

        match = _SESSION_COOKIE_RE.search(set_cookie)
        if not match:
            raise UpstreamProtocolError("Could not parse session cookie")

        logger.info("Obtained new Forkable session")
        return match.group(0)

    def fetch_deliveries(self, token: str, club_ids: Sequence[int], from_date: str) -> dict[str, Any]:
        """Raw deliveries → orders → pieces payload, returned unmodified."""
        payload = {"clubIds": [int(c) for c in club_ids], "from": from_date}
        response = self._post(FORKABLE_DELIVERIES_PATH, payload=payload, headers={"Cookie": token})

        if not response.ok:
            raise UpstreamHttpError(f"status {response.status_code}", status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamProtocolError("Deliveries response is not valid JSON") from e

        if not isinstance(data, dict):
            raise UpstreamProtocolError("Deliveries response is not a JSON object")
        return data
