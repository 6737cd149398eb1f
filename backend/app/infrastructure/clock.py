"""Clock — the only place that reads the system date.

Invariants:
    - today_iso returns the current calendar day as YYYY-MM-DD in the given timezone
    - "UTC" never needs the tz database
"""

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo


def _resolve_timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def today_iso(timezone_name: str = "UTC") -> str:
    return datetime.now(_resolve_timezone(timezone_name)).date().isoformat()
