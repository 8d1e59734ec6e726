from datetime import date, datetime

from decimal import Decimal

import pytz

from bookings.contracts import BookingContext
from bookings.formatting import (
    build_booking_summary,
    build_status_view,
    format_clock,
    format_long_date,
    format_price,
)
from clientapp.i18n import Translator
from tests.helpers import make_booking


def test_format_long_date_uses_indonesian_names_by_default():
    assert format_long_date("2025-03-10") == "Senin, 10 Maret 2025"
    assert format_long_date(date(2025, 8, 17)) == "Minggu, 17 Agustus 2025"


def test_format_long_date_in_english():
    assert format_long_date("2025-03-10", Translator("en")) == "Monday, 10 March 2025"


def test_format_long_date_converts_aware_datetimes_to_booking_timezone():
    late_utc = pytz.utc.localize(datetime(2025, 3, 9, 20, 0))
    assert format_long_date(late_utc) == "Senin, 10 Maret 2025"


def test_format_long_date_handles_garbage():
    assert format_long_date("not a date") == "-"


def test_format_clock():
    assert format_clock(pytz.utc.localize(datetime(2025, 3, 10, 2, 5))) == "09:05"
    assert format_clock(None) == "--:--"


def test_format_price_groups_thousands():
    assert format_price(150000) == "Rp150.000"
    assert format_price("1250000") == "Rp1.250.000"
    assert format_price(Decimal("0")) == "Rp0"
    assert format_price(None) == "Rp0"
    assert format_price("n/a") == "Rp0"


def test_build_booking_summary_prefers_descriptive_court_and_price_from():
    context = BookingContext(court="Lapangan A", court_id=3, date="2025-03-10", time="09:00-10:00", price_from=90000)

    fields = build_booking_summary(context)

    assert [(f.label, f.value) for f in fields] == [
        ("Lapangan", "Lapangan A"),
        ("Jadwal", "Senin, 10 Maret 2025, 09:00-10:00"),
        ("Harga Perkiraan", "Rp90.000"),
    ]


def test_build_status_view_lists_booking_details():
    fields = build_status_view(make_booking("101"), Translator("en"))

    assert [(f.label, f.value) for f in fields] == [
        ("Status", "WAITING_PAYMENT"),
        ("Court", "Lapangan Futsal A"),
        ("Location", "Jl. Merdeka 1"),
        ("Date", "Monday, 10 March 2025"),
        ("Time", "09:00 - 10:30"),
        ("Price", "Rp150.000"),
    ]


def test_build_status_view_falls_back_to_court_id():
    booking = make_booking("101", court=None, courtId=12)

    fields = dict((f.label, f.value) for f in build_status_view(booking, Translator("en")))

    assert fields["Court"] == "12"
    assert fields["Location"] == "-"
