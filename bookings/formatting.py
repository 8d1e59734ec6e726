"""Display-ready strings for the booking summary and status views."""

from __future__ import annotations
from tracking import t

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

import pytz

from clientapp.i18n import Translator, create_translator
from infrastructure.constants import CURRENCY_PREFIX, DEFAULT_TIMEZONE

from .contracts import Booking, BookingContext
from .time_range import parse_slot_date


@dataclass(frozen=True)
class DisplayField:
    label: str
    value: str


def format_long_date(
    value: Any,
    translator: Optional[Translator] = None,
    timezone_str: str = DEFAULT_TIMEZONE,
) -> str:
    """Render ``value`` as e.g. ``"Senin, 10 Maret 2025"``; unknown input yields ``"-"``."""
    t('bookings.formatting.format_long_date')
    translator = translator or create_translator()

    if isinstance(value, datetime):
        day = _localize(value, timezone_str).date()
    else:
        day = value if isinstance(value, date) else parse_slot_date(value)
    if day is None:
        return "-"

    weekday = translator.weekday_names()[day.weekday()]
    month = translator.month_names()[day.month - 1]
    return f"{weekday}, {day.day} {month} {day.year}"


def format_clock(value: Optional[datetime], timezone_str: str = DEFAULT_TIMEZONE) -> str:
    t('bookings.formatting.format_clock')
    if value is None:
        return "--:--"
    return _localize(value, timezone_str).strftime("%H:%M")


def format_price(amount: Any) -> str:
    """Format an amount the way id-ID locales do: ``Rp150.000``."""
    t('bookings.formatting.format_price')
    try:
        value = Decimal(str(amount if amount not in (None, "") else 0))
    except InvalidOperation:
        value = Decimal(0)
    if not value.is_finite():
        value = Decimal(0)

    whole = int(value.to_integral_value())
    grouped = f"{abs(whole):,}".replace(",", ".")
    sign = "-" if whole < 0 else ""
    return f"{sign}{CURRENCY_PREFIX}{grouped}"


def build_booking_summary(
    context: BookingContext,
    translator: Optional[Translator] = None,
) -> List[DisplayField]:
    """Summary block shown above the booking form."""
    t('bookings.formatting.build_booking_summary')
    translator = translator or create_translator()
    court_label = context.court if context.court not in (None, "") else context.court_id
    schedule = f"{format_long_date(context.date, translator)}, {context.time or '-'}"
    return [
        DisplayField(translator.t('summary.court'), str(court_label if court_label is not None else "-")),
        DisplayField(translator.t('summary.schedule'), schedule),
        DisplayField(translator.t('summary.estimated_price'), format_price(context.estimated_price())),
    ]


def build_status_view(
    booking: Booking,
    translator: Optional[Translator] = None,
    timezone_str: str = DEFAULT_TIMEZONE,
) -> List[DisplayField]:
    """Fields shown for a fetched booking on the status view."""
    t('bookings.formatting.build_status_view')
    translator = translator or create_translator()
    court = booking.court
    court_name = (court.name if court else None) or booking.court_id
    location = (court.location if court else None) or "-"
    time_range = f"{format_clock(booking.start_time, timezone_str)} - {format_clock(booking.end_time, timezone_str)}"
    return [
        DisplayField(translator.t('summary.status'), booking.status_label),
        DisplayField(translator.t('summary.court'), str(court_name if court_name is not None else "-")),
        DisplayField(translator.t('summary.location'), str(location)),
        DisplayField(translator.t('summary.date'), format_long_date(booking.start_time, translator, timezone_str)),
        DisplayField(translator.t('summary.time'), time_range),
        DisplayField(translator.t('summary.price'), format_price(booking.total_price)),
    ]


def _localize(value: datetime, timezone_str: str) -> datetime:
    tz = pytz.timezone(timezone_str)
    if value.tzinfo is None:
        return tz.localize(value)
    return value.astimezone(tz)
