"""Duration value type with component-wise arithmetic and comparison."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any


@dataclass(frozen=True)
class Duration:
    """An ISO 8601 duration.

    Date components (years, months, weeks, days) are calendar units; time
    components (hours, minutes, seconds) are linear. Only ``seconds`` may
    carry a fractional part. Fields are independent and signed: parsing
    ``-P1DT2H`` negates every present component, while values built through
    arithmetic may mix signs.
    """

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: float = 0.0

    # ---- Construction / conversion ----

    @classmethod
    def parse(cls, text: str, *, allow_empty: bool = True) -> Duration:
        """Parse an ISO 8601 duration literal such as ``P1Y2M3DT4H5M6.5S``."""
        from pyisoduration._parser import parse

        return parse(text, allow_empty=allow_empty)

    @classmethod
    def from_timedelta(cls, td: timedelta) -> Duration:
        """Build a time-only duration from a ``timedelta``."""
        from pyisoduration._bridge import from_timedelta

        return from_timedelta(td)

    def to_timedelta(self) -> timedelta:
        """Return the time component as a ``timedelta``; date fields are ignored."""
        from pyisoduration._bridge import to_timedelta

        return to_timedelta(self)

    def shift(self, moment: datetime) -> datetime:
        from pyisoduration._calendar import shift

        return shift(moment, self)

    def unshift(self, moment: datetime) -> datetime:
        from pyisoduration._calendar import unshift

        return unshift(moment, self)

    def __str__(self) -> str:
        from pyisoduration._formatter import format_duration

        return format_duration(self)

    # ---- Predicates ----

    def is_zero(self) -> bool:
        """Report whether this is the empty duration, P0D."""
        return (
            self.years == 0
            and self.months == 0
            and self.weeks == 0
            and self.days == 0
            and self.hours == 0
            and self.minutes == 0
            and self.seconds == 0
        )

    def is_negative(self) -> bool:
        """Report whether any single component is below zero."""
        return (
            self.years < 0
            or self.months < 0
            or self.weeks < 0
            or self.days < 0
            or self.hours < 0
            or self.minutes < 0
            or self.seconds < 0
        )

    def has_date_part(self) -> bool:
        return self.years != 0 or self.months != 0 or self.weeks != 0 or self.days != 0

    def has_time_part(self) -> bool:
        return self.hours != 0 or self.minutes != 0 or self.seconds != 0

    # ---- Arithmetic ----

    def negate(self) -> Duration:
        return Duration(
            years=-self.years,
            months=-self.months,
            weeks=-self.weeks,
            days=-self.days,
            hours=-self.hours,
            minutes=-self.minutes,
            seconds=-self.seconds,
        )

    def add(self, other: Duration) -> Duration:
        """Component-wise sum.

        No carry happens between fields, so ``PT90M`` stays ninety minutes.
        With years or months present the result only approximates a calendar
        duration, since month lengths vary.
        """
        return Duration(
            years=self.years + other.years,
            months=self.months + other.months,
            weeks=self.weeks + other.weeks,
            days=self.days + other.days,
            hours=self.hours + other.hours,
            minutes=self.minutes + other.minutes,
            seconds=self.seconds + other.seconds,
        )

    def subtract(self, other: Duration) -> Duration:
        """Component-wise difference, with the same caveats as :meth:`add`."""
        return Duration(
            years=self.years - other.years,
            months=self.months - other.months,
            weeks=self.weeks - other.weeks,
            days=self.days - other.days,
            hours=self.hours - other.hours,
            minutes=self.minutes - other.minutes,
            seconds=self.seconds - other.seconds,
        )

    def multiply(self, n: int) -> Duration:
        return Duration(
            years=self.years * n,
            months=self.months * n,
            weeks=self.weeks * n,
            days=self.days * n,
            hours=self.hours * n,
            minutes=self.minutes * n,
            seconds=self.seconds * float(n),
        )

    # ---- Comparison ----

    def equal(self, other: Duration) -> bool:
        """Exact equality of all seven components.

        Seconds use plain float equality. Equal components with years or
        months set may still span different calendar lengths.
        """
        return (
            self.years == other.years
            and self.months == other.months
            and self.weeks == other.weeks
            and self.days == other.days
            and self.hours == other.hours
            and self.minutes == other.minutes
            and self.seconds == other.seconds
        )

    def less_than(self, other: Duration) -> bool:
        """Order two durations field by field.

        Only meaningful for time-only durations. When either side has a date
        component the date fields are compared first (years, months, weeks,
        days; first difference wins) and the time fields break ties. Calendar
        and linear units are never converted into each other, so mixed
        durations compare lexicographically rather than by length.
        """
        if self.has_date_part() or other.has_date_part():
            if self.years != other.years:
                return self.years < other.years
            if self.months != other.months:
                return self.months < other.months
            if self.weeks != other.weeks:
                return self.weeks < other.weeks
            if self.days != other.days:
                return self.days < other.days
        if self.hours != other.hours:
            return self.hours < other.hours
        if self.minutes != other.minutes:
            return self.minutes < other.minutes
        return self.seconds < other.seconds

    def greater_than(self, other: Duration) -> bool:
        return other.less_than(self)

    # ---- Operators ----

    def __neg__(self) -> Duration:
        return self.negate()

    def __add__(self, other: Any) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, n: Any) -> Duration:
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return self.multiply(n)

    __rmul__ = __mul__

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.less_than(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.greater_than(other)
