from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SessionToken:
    """Upstream session credential (the ``name=value`` cookie pair) and its expiry."""

    value: str
    expires_at: datetime

    def is_valid(self, now: datetime) -> bool:
        return bool(self.value) and now < self.expires_at


@dataclass(frozen=True)
class ForkableSettings:
    """Raw upstream settings as read from the environment.

    Values are validated when a request needs them, not at startup.
    """

    admin_email: Optional[str]
    admin_password: Optional[str]
    session_cookie: Optional[str]
    club_ids: Optional[str]
    base_url: str
    timeout_seconds: float
