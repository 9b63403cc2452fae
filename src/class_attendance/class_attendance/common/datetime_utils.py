from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Union

from ..core.exceptions import ValidationError

DayLike = Union[date, datetime, str]

_ISO_PREFIX = re.compile(r"^(\d{4}-\d{2}-\d{2})(?:[T ](.+))?$")
# fromisoformat before 3.11 only takes 3 or 6 fraction digits
_FRACTION = re.compile(r"(\d{2}:\d{2}:\d{2})\.\d+")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_day(value: DayLike) -> date:
    """Normalize a date, datetime or ISO-8601 string to its calendar day.

    The day is taken as written: time of day and any UTC offset are dropped
    without converting between zones, so ``2024-03-01T23:59:00Z`` is
    ``2024-03-01`` wherever the server runs.
    """

    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Invalid date: {value!r}")

    m = _ISO_PREFIX.match(value.strip())
    if not m:
        raise ValidationError(f"Invalid date: {value!r}")

    day_s, time_s = m.group(1), m.group(2)
    try:
        day = parse_iso_date(day_s)
        if time_s:
            if time_s.endswith(("Z", "z")):
                time_s = time_s[:-1] + "+00:00"
            time_s = _FRACTION.sub(r"\1", time_s, count=1)
            datetime.fromisoformat(f"{day_s}T{time_s}")
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}") from None
    return day


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def week_start(day: date) -> date:
    """Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)
