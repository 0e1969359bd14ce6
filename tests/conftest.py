from __future__ import annotations

from datetime import datetime, timezone

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2025, 6, 11, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def sample_payload() -> dict:
    return {
        "deliveries": [
            {
                "orders": [
                    {
                        "pieces": [
                            {
                                "date": "2025-06-09",
                                "userId": 1,
                                "user": {"email": "alice@example.com"},
                                "userFullName": "Alice",
                                "isConfirmed": True,
                            },
                            {
                                "date": "2025-06-09",
                                "userId": 2,
                                "user": {"email": "bob@example.com"},
                                "userFullName": "Bob",
                                "isConfirmed": True,
                            },
                        ]
                    }
                ]
            }
        ]
    }
