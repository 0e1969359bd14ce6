from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Union

from ..core.constants import DISPLAYED_WEEKDAYS


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def to_utc_date(reference: Union[datetime, date]) -> date:
    """Calendar date of ``reference`` in UTC.

    Naive datetimes are taken to be UTC already.
    """
    if isinstance(reference, datetime):
        if reference.tzinfo is not None:
            reference = reference.astimezone(timezone.utc)
        return reference.date()
    return reference


def compute_displayed_week_dates(reference: Union[datetime, date]) -> list[str]:
    """Monday..Friday (YYYY-MM-DD) of the business week to display.

    Saturday and Sunday roll forward to the following week.
    """
    today = to_utc_date(reference)
    weekday = today.isoweekday()  # Monday=1 .. Sunday=7
    if weekday == 7:
        monday = today + timedelta(days=1)
    elif weekday == 6:
        monday = today + timedelta(days=2)
    else:
        monday = today - timedelta(days=weekday - 1)

    return [(monday + timedelta(days=i)).isoformat() for i in range(DISPLAYED_WEEKDAYS)]
