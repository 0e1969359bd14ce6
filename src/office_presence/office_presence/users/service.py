from __future__ import annotations

import logging
import secrets
from typing import Optional
from urllib.parse import urlencode

import requests

from ..common.validators import email_in_domain, require_setting
from ..core.constants import (
    DEFAULT_UPSTREAM_TIMEOUT_SECONDS,
    GOOGLE_AUTHORIZE_URL,
    GOOGLE_SCOPES,
    GOOGLE_TOKEN_URL,
    GOOGLE_USERINFO_URL,
)
from ..core.exceptions import AuthenticationError, AuthorizationError
from .model import GoogleSettings, SessionUser

logger = logging.getLogger(__name__)


class GoogleAuthService:
    """Use case: sign a viewer in with Google, restricted to one email domain."""

    def __init__(
        self,
        settings: GoogleSettings,
        session: Optional[requests.Session] = None,
        *,
        timeout: float = DEFAULT_UPSTREAM_TIMEOUT_SECONDS,
    ):
        self._settings = settings
        self._session = session or requests.Session()
        self._timeout = timeout

    @staticmethod
    def new_state() -> str:
        return secrets.token_urlsafe(24)

    def authorization_url(self, *, redirect_uri: str, state: str) -> str:
        client_id = require_setting(self._settings.client_id, "GOOGLE_CLIENT_ID")
        params = {
            "client_id": client_id,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "scope": " ".join(GOOGLE_SCOPES),
            "state": state,
            "prompt": "select_account",
        }
        domain = (self._settings.allowed_domain or "").strip()
        if domain:
            params["hd"] = domain
        return f"{GOOGLE_AUTHORIZE_URL}?{urlencode(params)}"

    def is_allowed(self, email: Optional[str]) -> bool:
        domain = require_setting(self._settings.allowed_domain, "ALLOWED_EMAIL_DOMAIN")
        return email_in_domain(email, domain)

    def _exchange_code(self, code: str, redirect_uri: str) -> str:
        data = {
            "code": code,
            "client_id": require_setting(self._settings.client_id, "GOOGLE_CLIENT_ID"),
            "client_secret": require_setting(self._settings.client_secret, "GOOGLE_CLIENT_SECRET"),
            "redirect_uri": redirect_uri,
            "grant_type": "authorization_code",
        }
        try:
            response = self._session.post(GOOGLE_TOKEN_URL, data=data, timeout=self._timeout)
            response.raise_for_status()
            access_token = response.json().get("access_token")
        except requests.exceptions.RequestException as e:
            logger.error("Google token exchange failed: %s", e)
            raise AuthenticationError("Google sign-in failed") from e
        except ValueError as e:
            raise AuthenticationError("Google sign-in returned an invalid response") from e

        if not access_token:
            raise AuthenticationError("Google sign-in returned no access token")
        return access_token

    def _fetch_userinfo(self, access_token: str) -> dict:
        try:
            response = self._session.get(
                GOOGLE_USERINFO_URL,
                headers={"Authorization": f"Bearer {access_token}"},
                timeout=self._timeout,
            )
            response.raise_for_status()
            info = response.json()
        except requests.exceptions.RequestException as e:
            logger.error("Google userinfo request failed: %s", e)
            raise AuthenticationError("Could not read your Google profile") from e
        except ValueError as e:
            raise AuthenticationError("Google profile response is invalid") from e
        return info if isinstance(info, dict) else {}

    def authenticate(self, *, code: str, redirect_uri: str) -> SessionUser:
        if not code:
            raise AuthenticationError("Missing authorization code")

        access_token = self._exchange_code(code, redirect_uri)
        info = self._fetch_userinfo(access_token)

        email = info.get("email")
        if not email or info.get("email_verified") is False:
            raise AuthenticationError("Your Google account has no verified email")
        if not self.is_allowed(email):
            logger.warning("Rejected sign-in from %s", email)
            raise AuthorizationError("This account is not allowed to use the dashboard")

        return SessionUser(email=email, name=info.get("name"))
