"""Conversion between durations and ``datetime.timedelta``."""

from __future__ import annotations

from datetime import timedelta

from pyisoduration._duration import Duration
from pyisoduration._errors import ERR_MSG_ELAPSED_OUT_OF_RANGE, ElapsedRangeError

_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND
_US_PER_HOUR = 60 * _US_PER_MINUTE


def to_timedelta(d: Duration) -> timedelta:
    """Return the linear time component of ``d``.

    Years, months, weeks and days are discarded since they have no fixed
    length. Seconds are rounded to microsecond resolution.

    Raises:
        ElapsedRangeError: If the time component is beyond what ``timedelta``
            can hold (about 999999999 days either way). The parser accepts
            components up to 2**63 - 1, so ``PT1000000000000H`` parses but
            cannot be converted.
    """
    try:
        return timedelta(hours=d.hours, minutes=d.minutes, seconds=d.seconds)
    except OverflowError as e:
        raise ElapsedRangeError(
            ERR_MSG_ELAPSED_OUT_OF_RANGE,
            f"time component of {d!r} does not fit in a timedelta: {e}",
            wrapped=e,
        ) from e


def from_timedelta(td: timedelta) -> Duration:
    """Decompose a ``timedelta`` into whole hours, whole minutes and seconds.

    Division truncates toward zero, so every component carries the sign of
    ``td`` (``-90min`` -> ``-PT1H30M``). Date components are left at zero.
    """
    total_us = (td.days * 86_400 + td.seconds) * _US_PER_SECOND + td.microseconds
    sign = -1 if total_us < 0 else 1
    hours, rest = divmod(abs(total_us), _US_PER_HOUR)
    minutes, rest = divmod(rest, _US_PER_MINUTE)
    return Duration(
        hours=sign * hours,
        minutes=sign * minutes,
        seconds=sign * rest / _US_PER_SECOND,
    )
