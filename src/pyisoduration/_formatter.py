"""Canonical text rendering of durations."""

from __future__ import annotations

import math
from decimal import Decimal
from io import StringIO

from pyisoduration._constants import (
    DATE_UNITS,
    DURATION_DESIGNATOR,
    NEGATIVE_SIGN,
    TIME_DESIGNATOR,
    TIME_UNITS,
    ZERO_DURATION_LITERAL,
)
from pyisoduration._duration import Duration


def format_seconds(value: float) -> str:
    """Render a non-negative seconds value without exponent or trailing zeros.

    Integral values drop the decimal point (``33.0`` -> ``33``); others use
    the shortest digits that round-trip (``33.3444`` -> ``33.3444``).
    """
    if not math.isfinite(value):
        return repr(value)
    if value == int(value):
        return str(int(value))
    # repr() gives the shortest round-trip digits; Decimal re-renders them
    # positionally so 1e-05 comes out as 0.00001.
    return format(Decimal(repr(value)), "f")


def format_duration(d: Duration) -> str:
    """Format a Duration as an ISO 8601 literal.

    The zero duration is always ``P0D``. Zero components are omitted and a
    single leading ``-`` is emitted when any component is negative; the
    digits themselves are absolute values.
    """
    if d.is_zero():
        return ZERO_DURATION_LITERAL

    w = StringIO()
    if d.is_negative():
        w.write(NEGATIVE_SIGN)
    w.write(DURATION_DESIGNATOR)

    for name, unit in DATE_UNITS.items():
        value = getattr(d, name)
        if value:
            w.write(f"{abs(value)}{unit}")

    if d.has_time_part():
        w.write(TIME_DESIGNATOR)
        if d.hours:
            w.write(f"{abs(d.hours)}{TIME_UNITS['hours']}")
        if d.minutes:
            w.write(f"{abs(d.minutes)}{TIME_UNITS['minutes']}")
        if d.seconds:
            w.write(f"{format_seconds(abs(d.seconds))}{TIME_UNITS['seconds']}")

    return w.getvalue()
