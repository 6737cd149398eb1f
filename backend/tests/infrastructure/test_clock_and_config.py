"""Clock & Settings — today's date shape and schedule timezone validation."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.config import Settings
from app.infrastructure.clock import today_iso


def test_today_iso_utc():
    assert today_iso("UTC") == datetime.now(timezone.utc).date().isoformat()


def test_today_iso_shape():
    today = today_iso()
    assert len(today) == 10
    assert today[4] == "-" and today[7] == "-"


def test_settings_default_timezone_is_utc():
    assert Settings().schedule_timezone == "UTC"


def test_settings_normalizes_utc():
    assert Settings(schedule_timezone="utc").schedule_timezone == "UTC"


def test_settings_rejects_unknown_timezone():
    with pytest.raises(ValidationError):
        Settings(schedule_timezone="Mars/Olympus_Mons")
