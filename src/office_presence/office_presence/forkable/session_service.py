from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import now_utc
from ..core.constants import SESSION_TOKEN_TTL_DAYS
from ..core.exceptions import UpstreamAuthError, UpstreamError
from .model import SessionToken
from .repository import SessionCache

logger = logging.getLogger(__name__)


class SessionTokenService:
    """Use case: hand out a valid upstream session token, logging in when needed.

    Concurrent callers may both see an expired token and both log in; each
    login yields an independently valid token, so the last write simply wins.
    """

    def __init__(
        self,
        cache: SessionCache,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        ttl: timedelta = timedelta(days=SESSION_TOKEN_TTL_DAYS),
    ):
        self._cache = cache
        self._clock = clock or now_utc
        self._ttl = ttl

    def get_valid_token(self, login_fn: Callable[[], str]) -> SessionToken:
        now = self._clock()
        cached = self._cache.get()
        if cached is not None and cached.is_valid(now):
            return cached

        logger.info("Upstream session token missing or expired, logging in")
        try:
            value = login_fn()
        except UpstreamAuthError:
            raise
        except UpstreamError as e:
            raise UpstreamAuthError(f"Forkable login failed: {e.message}", status_code=e.status_code) from e

        if not value or not str(value).strip():
            raise UpstreamAuthError("Forkable login returned no session token")

        return self._cache.set(str(value).strip(), now + self._ttl)
