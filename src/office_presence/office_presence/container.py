from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Union

from .core.constants import DEFAULT_UPSTREAM_TIMEOUT_SECONDS, FORKABLE_BASE_URL
from .forkable.client import ForkableClient
from .forkable.memory_session_cache import InMemorySessionCache
from .forkable.model import ForkableSettings
from .forkable.session_service import SessionTokenService
from .roster.service import RosterService
from .users.model import GoogleSettings
from .users.service import GoogleAuthService


@dataclass(frozen=True)
class Container:
    session_cache: InMemorySessionCache
    forkable_client: ForkableClient

    token_service: SessionTokenService
    roster_service: RosterService
    auth_service: GoogleAuthService


def _forkable_settings(settings: Union[ModuleType, object]) -> ForkableSettings:
    return ForkableSettings(
        admin_email=getattr(settings, "FORKABLE_ADMIN_EMAIL", None),
        admin_password=getattr(settings, "FORKABLE_ADMIN_PASSWORD", None),
        session_cookie=getattr(settings, "FORKABLE_SESSION_COOKIE", None),
        club_ids=getattr(settings, "FORKABLE_CLUB_IDS", None),
        base_url=getattr(settings, "FORKABLE_BASE_URL", None) or FORKABLE_BASE_URL,
        timeout_seconds=float(getattr(settings, "FORKABLE_TIMEOUT_SECONDS", DEFAULT_UPSTREAM_TIMEOUT_SECONDS)),
    )


def build_container(*, settings: Union[ModuleType, object]) -> Container:
    forkable = _forkable_settings(settings)

    session_cache = InMemorySessionCache()
    forkable_client = ForkableClient(base_url=forkable.base_url, timeout=forkable.timeout_seconds)

    token_service = SessionTokenService(session_cache)
    roster_service = RosterService(forkable_client, token_service, forkable)
    auth_service = GoogleAuthService(
        GoogleSettings(
            client_id=getattr(settings, "GOOGLE_CLIENT_ID", None),
            client_secret=getattr(settings, "GOOGLE_CLIENT_SECRET", None),
            allowed_domain=getattr(settings, "ALLOWED_EMAIL_DOMAIN", None),
        )
    )

    return Container(
        session_cache=session_cache,
        forkable_client=forkable_client,
        token_service=token_service,
        roster_service=roster_service,
        auth_service=auth_service,
    )
