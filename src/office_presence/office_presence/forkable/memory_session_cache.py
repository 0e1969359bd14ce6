from __future__ import annotations

from datetime import datetime
from typing import Optional

from .model import SessionToken


class InMemorySessionCache:
    """Process-local token slot.

    Not durable: a restart or a second worker process starts empty and logs in again.
    Reads and writes swap a whole immutable ``SessionToken``, so no lock is taken.
    """

    def __init__(self) -> None:
        self._token: Optional[SessionToken] = None

    def get(self) -> Optional[SessionToken]:
        return self._token

    def set(self, token: str, expires_at: datetime) -> SessionToken:
        stored = SessionToken(value=token, expires_at=expires_at)
        self._token = stored
        return stored
