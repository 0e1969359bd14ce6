from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .model import SessionToken


class SessionCache(Protocol):
    """Storage for the single upstream session token.

    The token service depends on this interface so tests can swap in a fake.
    """

    def get(self) -> Optional[SessionToken]:
        raise NotImplementedError

    def set(self, token: str, expires_at: datetime) -> SessionToken:
        raise NotImplementedError
