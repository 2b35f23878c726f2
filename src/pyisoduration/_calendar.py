"""Calendar-aware application of durations to datetimes.

Date components are applied to the wall-clock date with
``dateutil.relativedelta``, which keeps the time of day fixed even when a
DST transition changes the UTC offset in between. Time components are then
added as elapsed time, measured in UTC for aware datetimes, so "PT24H" and
"P1D" differ across a transition.

Month arithmetic clamps to the end of the month: Jan 31 + P1M is Feb 28
(or 29), and Mar 31 - P1M is Feb 28. Shifting by months from a day after
the 28th is therefore not reversible with :func:`unshift`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta

from pyisoduration._bridge import to_timedelta
from pyisoduration._constants import DAYS_PER_WEEK
from pyisoduration._duration import Duration

logger = logging.getLogger(__name__)


def _add_calendar(moment: datetime, years: int, months: int, days: int) -> datetime:
    if years or months:
        shifted = moment + relativedelta(years=years, months=months)
        if shifted.day != moment.day:
            logger.debug(
                "clamped day of month shifting %s by %dY%dM to %s",
                moment.isoformat(),
                years,
                months,
                shifted.date().isoformat(),
            )
        moment = shifted
    if days:
        moment = moment + relativedelta(days=days)
    return moment


def _add_elapsed(moment: datetime, delta: timedelta) -> datetime:
    if moment.tzinfo is None or moment.utcoffset() is None:
        return moment + delta
    tz = moment.tzinfo
    return (moment.astimezone(timezone.utc) + delta).astimezone(tz)


def shift(moment: datetime, d: Duration) -> datetime:
    """Return ``moment`` moved forward by ``d``.

    Weeks and days are combined as ``weeks * 7 + days`` and applied together
    with years and months as calendar units; hours, minutes and seconds are
    then added as elapsed time.
    """
    total_days = d.weeks * DAYS_PER_WEEK + d.days
    moment = _add_calendar(moment, d.years, d.months, total_days)
    return _add_elapsed(moment, to_timedelta(d))


def unshift(moment: datetime, d: Duration) -> datetime:
    """Return ``moment`` moved backward by ``d``; the mirror of :func:`shift`."""
    total_days = d.weeks * DAYS_PER_WEEK + d.days
    moment = _add_calendar(moment, -d.years, -d.months, -total_days)
    return _add_elapsed(moment, -to_timedelta(d))
