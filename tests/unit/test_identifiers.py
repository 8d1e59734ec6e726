import math

import pytest

from bookings.identifiers import to_numeric_id


@pytest.mark.parametrize(
    "value, expected",
    [
        (42, 42),
        ("42", 42),
        (" 7 ", 7),
        (12.0, 12),
        ("court-42", 42),
        ("lapangan_3", 3),
        ("id:0009", 9),
    ],
)
def test_to_numeric_id_resolves_numbers_and_decorated_strings(value, expected):
    assert to_numeric_id(value) == expected


@pytest.mark.parametrize("value", ["abc", "", None, "court-", [], {}])
def test_to_numeric_id_rejects_values_without_digits(value):
    assert to_numeric_id(value) is None


def test_to_numeric_id_uses_first_digit_run():
    assert to_numeric_id("court-12-slot-4") == 12


def test_to_numeric_id_rejects_non_positive_and_fractional_numbers():
    assert to_numeric_id(0) is None
    assert to_numeric_id(-3) is None
    assert to_numeric_id("-3") is None
    assert to_numeric_id(2.5) is None


def test_to_numeric_id_rejects_booleans_and_non_finite_floats():
    assert to_numeric_id(True) is None
    assert to_numeric_id(math.nan) is None
    assert to_numeric_id(math.inf) is None
    assert to_numeric_id("nan") is None


def test_to_numeric_id_rejects_digit_runs_beyond_float_range():
    assert to_numeric_id("court-" + "9" * 400) is None
    assert to_numeric_id("court-" + "9" * 5000) is None


def test_to_numeric_id_keeps_long_digit_runs_exact():
    assert to_numeric_id("court-12345678901234567890") == 12345678901234567890
    assert to_numeric_id("court-" + "0" * 5000 + "7") == 7
