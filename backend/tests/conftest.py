"""Root conftest — shared test configuration and account fixtures."""

import os

import pytest

from app.core.payment_records import Account

# Pin scheduling to UTC and keep test logs readable
os.environ.setdefault("SCHEDULE_TIMEZONE", "UTC")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def ngn_accounts() -> list[Account]:
    """Two NGN accounts: ACC-001 (5000) and ACC-002 (1500)."""
    return [
        Account(id="ACC-001", balance=5000, currency="NGN"),
        Account(id="ACC-002", balance=1500, currency="NGN"),
    ]
