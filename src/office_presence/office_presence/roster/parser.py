"""Parse the raw deliveries payload into flat ``Piece`` records.

The payload is untrusted JSON. Any level that does not have the expected
shape is skipped rather than reported, so a partly malformed response still
produces a roster.
"""
from __future__ import annotations

from typing import Any, Iterator, Optional

from .model import Piece


def _list_field(obj: Any, key: str) -> list:
    if not isinstance(obj, dict):
        return []
    value = obj.get(key)
    return value if isinstance(value, list) else []


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _user_id(value: Any) -> Optional[int]:
    # bool is an int subclass; a flag is not an identifier
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        digits = value.strip()
        # str.isdigit() also accepts superscripts like "²" that int() rejects
        if digits.isascii() and digits.isdecimal():
            return int(digits)
    return None


def parse_piece(raw: Any) -> Optional[Piece]:
    """Normalize one raw piece, or ``None`` when it is not an object at all."""
    if not isinstance(raw, dict):
        return None

    user = raw.get("user")
    email = _text(user.get("email")) if isinstance(user, dict) else None

    return Piece(
        date=_text(raw.get("date")),
        user_id=_user_id(raw.get("userId")),
        email=email,
        full_name=_text(raw.get("userFullName")),
        is_confirmed=raw.get("isConfirmed") is True,
    )


def iter_pieces(payload: Any) -> Iterator[Piece]:
    for delivery in _list_field(payload, "deliveries"):
        for order in _list_field(delivery, "orders"):
            for raw in _list_field(order, "pieces"):
                piece = parse_piece(raw)
                if piece is not None:
                    yield piece


def parse_pieces(payload: Any) -> list[Piece]:
    return list(iter_pieces(payload))
