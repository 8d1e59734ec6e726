"""Build absolute start/end timestamps from a slot date and an "HH:MM-HH:MM" range."""

from __future__ import annotations
from tracking import t

from datetime import date, datetime
from typing import Any, Optional

import pytz

from infrastructure.constants import DATE_FORMAT, DEFAULT_TIMEZONE, TIME_FORMAT, TIME_RANGE_SEPARATOR

from .contracts import TimeRange


def build_time_range(
    slot_date: Any,
    time_range: Optional[str],
    timezone_str: str = DEFAULT_TIMEZONE,
) -> Optional[TimeRange]:
    """Return the localized slot boundaries, or ``None`` for malformed input.

    The range is split on its first separator and each side is parsed
    independently against ``slot_date``; a missing separator, an unparsable
    side or an end that is not after the start all fail the whole range.
    """
    t('bookings.time_range.build_time_range')

    if not isinstance(time_range, str) or TIME_RANGE_SEPARATOR not in time_range:
        return None

    day = parse_slot_date(slot_date)
    if day is None:
        return None

    start_str, end_str = (part.strip() for part in time_range.split(TIME_RANGE_SEPARATOR, 1))
    start = _combine(day, start_str, timezone_str)
    end = _combine(day, end_str, timezone_str)
    if start is None or end is None or end <= start:
        return None
    return TimeRange(start=start, end=end)


def parse_slot_date(value: Any) -> Optional[date]:
    """Accept a ``date``/``datetime`` or a ``YYYY-MM-DD`` string."""
    t('bookings.time_range.parse_slot_date')

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def _combine(day: date, time_str: str, timezone_str: str) -> Optional[datetime]:
    t('bookings.time_range._combine')

    if len(time_str) != 5:
        return None
    try:
        clock = datetime.strptime(time_str, TIME_FORMAT).time()
    except ValueError:
        return None
    return pytz.timezone(timezone_str).localize(datetime.combine(day, clock))
