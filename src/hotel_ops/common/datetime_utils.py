from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from ..core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_hhmm(value: Optional[str]) -> Optional[int]:
    """Parse ``HH:MM`` (or ``HH:MM:SS`` from SQL time columns) into minute of day.

    Returns None for empty or malformed input.
    """
    if not value or not isinstance(value, str):
        return None
    m = _HHMM_RE.match(value.strip())
    if not m:
        return None
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * MINUTES_PER_HOUR + minutes


def format_hhmm(minute: int) -> str:
    h, m = divmod(minute % MINUTES_PER_DAY, MINUTES_PER_HOUR)
    return f"{h:02d}:{m:02d}"


def format_12h(minute: int) -> str:
    """``13:30`` -> ``1:30 PM``; midnight is ``12:00 AM``."""
    h, m = divmod(minute % MINUTES_PER_DAY, MINUTES_PER_HOUR)
    period = "PM" if h >= 12 else "AM"
    return f"{h % 12 or 12}:{m:02d} {period}"


def local_datetime(now: datetime, tz_offset_minutes: Optional[int] = None) -> datetime:
    """Wall-clock datetime used for shift evaluation.

    ``tz_offset_minutes`` follows the browser ``getTimezoneOffset()`` convention:
    minutes *behind* UTC (UTC+07:00 is ``-420``). Naive instants are taken as UTC
    when an offset is given. Without an offset the instant's own wall clock is used.
    """
    if tz_offset_minutes is None:
        return now
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc).replace(tzinfo=None)
    return now - timedelta(minutes=int(tz_offset_minutes))


def minute_of_day(now: datetime, tz_offset_minutes: Optional[int] = None) -> int:
    local = local_datetime(now, tz_offset_minutes)
    return local.hour * MINUTES_PER_HOUR + local.minute
