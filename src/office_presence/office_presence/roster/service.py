from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import compute_displayed_week_dates, now_utc
from ..common.display import format_date_for_display, name_to_hsl
from ..common.validators import parse_club_ids, require_setting
from ..core.constants import FORKABLE_SESSION_COOKIE_NAME
from ..forkable.client import ForkableClient
from ..forkable.model import ForkableSettings
from ..forkable.session_service import SessionTokenService
from .aggregator import aggregate, roster_to_json
from .model import DayCard, PersonBadge, RosterByDate

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: who plans to be in the office this (or next) business week."""

    def __init__(
        self,
        client: ForkableClient,
        tokens: SessionTokenService,
        settings: ForkableSettings,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._client = client
        self._tokens = tokens
        self._settings = settings
        self._clock = clock or now_utc

    def club_ids(self) -> list[int]:
        return parse_club_ids(self._settings.club_ids)

    def _login(self) -> str:
        cookie = (self._settings.session_cookie or "").strip()
        if cookie:
            # Deployments without admin credentials paste the cookie value directly.
            if not cookie.startswith(f"{FORKABLE_SESSION_COOKIE_NAME}="):
                cookie = f"{FORKABLE_SESSION_COOKIE_NAME}={cookie}"
            return cookie

        email = require_setting(self._settings.admin_email, "FORKABLE_ADMIN_EMAIL")
        password = require_setting(self._settings.admin_password, "FORKABLE_ADMIN_PASSWORD")
        return self._client.login(email, password)

    def now(self) -> datetime:
        return self._clock()

    def week_dates(self, now: Optional[datetime] = None) -> list[str]:
        return compute_displayed_week_dates(now or self._clock())

    def get_roster(self, now: Optional[datetime] = None) -> RosterByDate:
        club_ids = self.club_ids()
        from_date = self.week_dates(now)[0]

        token = self._tokens.get_valid_token(self._login)
        payload = self._client.fetch_deliveries(token.value, club_ids, from_date)
        roster = aggregate(payload)

        logger.info("Roster for %s: %d day(s) across clubs %s", from_date, len(roster), club_ids)
        return roster

    def get_roster_json(self, now: Optional[datetime] = None) -> dict[str, list[dict]]:
        return roster_to_json(self.get_roster(now))

    def build_week(self, roster: RosterByDate, week_dates: Sequence[str]) -> list[DayCard]:
        cards = []
        for day in week_dates:
            day_name, month_day = format_date_for_display(day)
            badges = []
            for person in roster.get(day, []):
                colors = name_to_hsl(person.name)
                badges.append(
                    PersonBadge(
                        name=person.name,
                        email=person.email,
                        background_color=colors["background_color"],
                        color=colors["color"],
                    )
                )
            cards.append(DayCard(date=day, day_name=day_name, month_day=month_day, people=badges))
        return cards
