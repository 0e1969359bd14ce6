from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from ..core.constants import UNKNOWN_PERSON_NAME
from .model import Person, Piece, RosterByDate
from .parser import parse_pieces

logger = logging.getLogger(__name__)


def dedup_key(piece: Piece) -> Optional[str]:
    """Identity of the person behind a piece: numeric id first, email otherwise."""
    if piece.user_id is not None:
        return str(piece.user_id)
    return piece.email


def aggregate_pieces(pieces: Iterable[Piece]) -> RosterByDate:
    """Fold pieces into date -> people, keeping the first piece seen per person.

    Unconfirmed pieces and pieces without a date or an identifier are dropped.
    """
    seen: dict[str, dict[str, Person]] = {}
    unidentified = 0

    for piece in pieces:
        if not piece.is_confirmed or not piece.date:
            continue
        key = dedup_key(piece)
        if not key:
            unidentified += 1
            continue

        people = seen.setdefault(piece.date, {})
        if key not in people:
            people[key] = Person(name=piece.full_name or UNKNOWN_PERSON_NAME, email=piece.email)

    if unidentified:
        logger.debug("Dropped %d confirmed piece(s) without user id or email", unidentified)

    return {day: list(people.values()) for day, people in seen.items()}


def aggregate(payload: Any) -> RosterByDate:
    return aggregate_pieces(parse_pieces(payload))


def roster_to_json(roster: RosterByDate) -> dict[str, list[dict]]:
    return {day: [p.to_dict() for p in people] for day, people in roster.items()}
