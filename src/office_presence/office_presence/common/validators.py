from __future__ import annotations

from typing import Optional

from ..core.exceptions import ConfigurationError


def require_setting(value: Optional[str], name: str) -> str:
    if value is None or not str(value).strip():
        raise ConfigurationError(f"{name} is missing")
    return str(value).strip()


def parse_club_ids(raw: Optional[str]) -> list[int]:
    """Parse a comma-separated list of club ids.

    Entries that are not integers are dropped; an empty result is an error.
    """
    raw = require_setting(raw, "FORKABLE_CLUB_IDS")
    club_ids: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        try:
            club_ids.append(int(part))
        except ValueError:
            continue
    if not club_ids:
        raise ConfigurationError("FORKABLE_CLUB_IDS has no valid integer ids")
    return club_ids


def email_in_domain(email: Optional[str], domain: Optional[str]) -> bool:
    if not email or not domain:
        return False
    return email.strip().lower().endswith("@" + domain.strip().lower().lstrip("@"))
