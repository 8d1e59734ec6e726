"""Identifier normalization for loosely-typed court and user ids."""

from __future__ import annotations
from tracking import t

import math
import re
from typing import Any, Optional

_DIGIT_RUN = re.compile(r"\d+")


def to_numeric_id(value: Any) -> Optional[int]:
    """Coerce ``value`` into a positive integer identifier.

    Whole-value numeric coercion is tried first; when it does not produce a
    finite number, the first run of digits in ``str(value)`` is used instead,
    so decorated ids such as ``"court-12"`` resolve to ``12``. Returns ``None``
    when neither step yields a finite positive integer.
    """
    t('bookings.identifiers.to_numeric_id')

    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value if value > 0 else None

    number = _coerce_number(value)
    if number is not None:
        return _as_positive_int(number)

    match = _DIGIT_RUN.search(str(value))
    if not match:
        return None
    digits = match.group(0).lstrip("0") or "0"
    if not math.isfinite(float(digits)):
        return None
    number = int(digits)
    return number if number > 0 else None


def _coerce_number(value: Any) -> Optional[float]:
    t('bookings.identifiers._coerce_number')

    if isinstance(value, float):
        return value if math.isfinite(value) else None

    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _as_positive_int(number: float) -> Optional[int]:
    t('bookings.identifiers._as_positive_int')

    if number <= 0 or not number.is_integer():
        return None
    return int(number)
