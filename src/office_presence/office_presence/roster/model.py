from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Piece:
    """One upstream order line: one person's order for one date."""

    date: Optional[str]
    user_id: Optional[int]
    email: Optional[str]
    full_name: Optional[str]
    is_confirmed: bool


@dataclass(frozen=True)
class Person:
    name: str
    email: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "email": self.email}


RosterByDate = dict[str, list[Person]]


@dataclass(frozen=True)
class PersonBadge:
    name: str
    email: Optional[str]
    background_color: str
    color: str


@dataclass(frozen=True)
class DayCard:
    """Read-model for one column of the dashboard."""

    date: str
    day_name: str
    month_day: str
    people: list[PersonBadge] = field(default_factory=list)
