"""Small formatting helpers used by the dashboard templates."""
from __future__ import annotations

from datetime import datetime


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def name_to_hsl(name: str) -> dict[str, str]:
    """Deterministic pastel badge colours for a person's name."""
    h = 0
    for ch in name:
        h = ord(ch) + (_int32(h << 5) - h)
    hue = abs(h) % 360
    return {
        "background_color": f"hsl({hue}, 70%, 90%)",
        "color": f"hsl({hue}, 30%, 30%)",
    }


def format_date_for_display(date_str: str) -> tuple[str, str]:
    """Return (weekday abbreviation, "Mon D") for an ISO date.

    Unparseable input is returned as-is with an empty second label.
    """
    try:
        dt = datetime.strptime(date_str, "%Y-%m-%d")
    except (TypeError, ValueError):
        return date_str, ""
    return dt.strftime("%a"), f"{dt.strftime('%b')} {dt.day}"
