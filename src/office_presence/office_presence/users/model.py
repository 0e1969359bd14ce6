from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after sign-in."""

    email: str
    name: Optional[str] = None


@dataclass(frozen=True)
class GoogleSettings:
    client_id: Optional[str]
    client_secret: Optional[str]
    allowed_domain: Optional[str]
