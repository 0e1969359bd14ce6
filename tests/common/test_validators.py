import pytest

from src.office_presence.office_presence.common.validators import email_in_domain, parse_club_ids, require_setting
from src.office_presence.office_presence.core.exceptions import ConfigurationError


def test_parse_club_ids_drops_non_numeric_entries():
    assert parse_club_ids("101, 202,abc,,303") == [101, 202, 303]


@pytest.mark.parametrize("raw", [None, "", "   ", "abc,def"])
def test_parse_club_ids_requires_at_least_one_id(raw):
    with pytest.raises(ConfigurationError):
        parse_club_ids(raw)


def test_require_setting_names_the_missing_value():
    with pytest.raises(ConfigurationError, match="FORKABLE_ADMIN_EMAIL"):
        require_setting(None, "FORKABLE_ADMIN_EMAIL")


def test_email_in_domain_matches_suffix_only():
    assert email_in_domain("alice@example.com", "example.com")
    assert email_in_domain("Alice@Example.COM", "example.com")
    assert not email_in_domain("alice@notexample.com", "example.com")
    assert not email_in_domain("alice@example.com.evil.io", "example.com")
    assert not email_in_domain(None, "example.com")
    assert not email_in_domain("alice@example.com", "")
