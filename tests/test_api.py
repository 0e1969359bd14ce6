from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.office_presence.office_presence.container import Container
from src.office_presence.office_presence.core.exceptions import UpstreamHttpError
from src.office_presence.office_presence.forkable.memory_session_cache import InMemorySessionCache
from src.office_presence.office_presence.forkable.model import ForkableSettings
from src.office_presence.office_presence.forkable.session_service import SessionTokenService
from src.office_presence.office_presence.main import create_app
from src.office_presence.office_presence.roster.service import RosterService
from src.office_presence.office_presence.users.model import GoogleSettings
from src.office_presence.office_presence.users.service import GoogleAuthService


class FakeForkableClient:
    def __init__(self, payload=None, fetch_error=None):
        self.payload = payload if payload is not None else {"deliveries": []}
        self.fetch_error = fetch_error
        self.logins = 0
        self.from_dates = []

    def login(self, email, password):
        self.logins += 1
        return "_easyorder_session=abc"

    def fetch_deliveries(self, token, club_ids, from_date):
        self.from_dates.append(from_date)
        if self.fetch_error:
            raise self.fetch_error
        return self.payload


@pytest.fixture
def make_client(monkeypatch, fixed_now):
    monkeypatch.setenv("APP_ENV", "testing")

    def _make(forkable_client, *, club_ids="101,202", clock=None):
        cache = InMemorySessionCache()
        tokens = SessionTokenService(cache, clock=lambda: fixed_now)
        settings = ForkableSettings(
            admin_email="admin@example.com",
            admin_password="secret",
            session_cookie=None,
            club_ids=club_ids,
            base_url="https://forkable.test",
            timeout_seconds=5.0,
        )
        container = Container(
            session_cache=cache,
            forkable_client=forkable_client,
            token_service=tokens,
            roster_service=RosterService(forkable_client, tokens, settings, clock=clock or (lambda: fixed_now)),
            auth_service=GoogleAuthService(GoogleSettings("cid", "csecret", "example.com")),
        )
        return create_app(container).test_client()

    return _make


def _sign_in(client, email="alice@example.com"):
    with client.session_transaction() as sess:
        sess["user_email"] = email
        sess["user_name"] = "Alice"


def test_api_requires_identity(make_client):
    resp = make_client(FakeForkableClient()).get("/api/data")

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Unauthorized"}


def test_api_returns_roster(make_client, sample_payload):
    client = make_client(FakeForkableClient(sample_payload))
    _sign_in(client)

    resp = client.get("/api/data")

    assert resp.status_code == 200
    assert resp.get_json() == {
        "2025-06-09": [
            {"name": "Alice", "email": "alice@example.com"},
            {"name": "Bob", "email": "bob@example.com"},
        ]
    }


def test_api_logs_in_once_across_requests(make_client):
    forkable = FakeForkableClient()
    client = make_client(forkable)
    _sign_in(client)

    client.get("/api/data")
    client.get("/api/data")

    assert forkable.logins == 1


def test_api_missing_club_ids_is_500(make_client):
    client = make_client(FakeForkableClient(), club_ids="")
    _sign_in(client)

    resp = client.get("/api/data")

    assert resp.status_code == 500
    assert "FORKABLE_CLUB_IDS" in resp.get_json()["error"]


def test_api_passes_upstream_status_through(make_client):
    client = make_client(FakeForkableClient(fetch_error=UpstreamHttpError("status 503", status_code=503)))
    _sign_in(client)

    resp = client.get("/api/data")

    assert resp.status_code == 503
    assert resp.get_json() == {"error": "status 503"}


def test_api_unexpected_error_is_500(make_client):
    client = make_client(FakeForkableClient(fetch_error=RuntimeError("boom")))
    _sign_in(client)

    resp = client.get("/api/data")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "boom"}


def test_dashboard_redirects_anonymous_visitors(make_client):
    resp = make_client(FakeForkableClient()).get("/")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/login")


def test_dashboard_renders_week(make_client, sample_payload):
    client = make_client(FakeForkableClient(sample_payload))
    _sign_in(client)

    resp = client.get("/")
    body = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert "Alice" in body and "Bob" in body
    assert "Jun 9" in body
    assert "No one ordered." in body
    assert "alice@example.com" in body


def test_dashboard_fetches_the_week_it_displays(make_client):
    # first read is Friday night, every later read is already Saturday
    readings = iter([datetime(2025, 6, 13, 23, 59, 59, tzinfo=timezone.utc)])
    saturday = datetime(2025, 6, 14, 0, 0, 1, tzinfo=timezone.utc)
    forkable = FakeForkableClient()
    client = make_client(forkable, clock=lambda: next(readings, saturday))
    _sign_in(client)

    body = client.get("/").get_data(as_text=True)

    assert forkable.from_dates == ["2025-06-09"]
    assert "Jun 9" in body
    assert "Jun 16" not in body


def test_dashboard_shows_upstream_error(make_client):
    client = make_client(FakeForkableClient(fetch_error=UpstreamHttpError("status 502", status_code=502)))
    _sign_in(client)

    resp = client.get("/")

    assert resp.status_code == 200
    assert "status 502" in resp.get_data(as_text=True)


def test_login_page_and_healthz_are_public(make_client):
    client = make_client(FakeForkableClient())

    assert client.get("/login").status_code == 200
    assert client.get("/healthz").get_json() == {"status": "ok"}


def test_login_page_redirects_signed_in_users(make_client):
    client = make_client(FakeForkableClient())
    _sign_in(client)

    resp = client.get("/login")

    assert resp.status_code == 302


def test_google_login_redirects_with_state(make_client):
    client = make_client(FakeForkableClient())

    resp = client.get("/auth/google")

    assert resp.status_code == 302
    assert resp.headers["Location"].startswith("https://accounts.google.com/")
    with client.session_transaction() as sess:
        assert sess["oauth_state"] in resp.headers["Location"]


def test_callback_with_wrong_state_does_not_sign_in(make_client):
    client = make_client(FakeForkableClient())
    with client.session_transaction() as sess:
        sess["oauth_state"] = "expected"

    resp = client.get("/auth/google/callback?state=other&code=c")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/login")
    with client.session_transaction() as sess:
        assert "user_email" not in sess


def test_logout_clears_session(make_client):
    client = make_client(FakeForkableClient())
    _sign_in(client)

    client.get("/logout")

    assert client.get("/api/data").status_code == 401
