"""timedelta conversion tests - ported from iso8601_test.go."""

from datetime import timedelta

import pytest

from pyisoduration import Duration, ElapsedRangeError, from_timedelta, parse, to_timedelta
from pyisoduration._errors import ERR_MSG_ELAPSED_OUT_OF_RANGE


class TestToTimedelta:
    @pytest.mark.parametrize(
        "d, want",
        [
            (Duration(hours=1), timedelta(hours=1)),
            (Duration(minutes=1), timedelta(minutes=1)),
            (Duration(seconds=1), timedelta(seconds=1)),
            (Duration(seconds=1.5), timedelta(milliseconds=1500)),
            (Duration(hours=1, minutes=30, seconds=45), timedelta(hours=1, minutes=30, seconds=45)),
            (Duration(hours=-1), timedelta(hours=-1)),
        ],
    )
    def test_to_timedelta(self, d, want):
        assert to_timedelta(d) == want
        assert d.to_timedelta() == want

    def test_ignores_date_components(self):
        d = Duration(years=1, months=2, weeks=3, days=4, hours=1)
        assert to_timedelta(d) == timedelta(hours=1)

    def test_beyond_timedelta_range(self):
        with pytest.raises(ElapsedRangeError) as exc_info:
            to_timedelta(parse("PT1000000000000H"))
        assert exc_info.value.user_message == ERR_MSG_ELAPSED_OUT_OF_RANGE
        assert isinstance(exc_info.value.wrapped, OverflowError)

    def test_negative_beyond_timedelta_range(self):
        with pytest.raises(ElapsedRangeError):
            Duration(seconds=-1e20).to_timedelta()

    def test_range_error_is_overflow_error(self):
        with pytest.raises(OverflowError):
            to_timedelta(Duration(minutes=10**15))


class TestFromTimedelta:
    @pytest.mark.parametrize(
        "td, want",
        [
            (timedelta(hours=1), Duration(hours=1)),
            (timedelta(minutes=1), Duration(minutes=1)),
            (timedelta(seconds=1), Duration(seconds=1)),
            (timedelta(milliseconds=1500), Duration(seconds=1.5)),
            (timedelta(hours=1, minutes=30, seconds=45), Duration(hours=1, minutes=30, seconds=45)),
            (timedelta(hours=-1), Duration(hours=-1)),
            (timedelta(seconds=90), Duration(minutes=1, seconds=30)),
            (timedelta(minutes=-90), Duration(hours=-1, minutes=-30)),
            (timedelta(days=2), Duration(hours=48)),
            (timedelta(0), Duration()),
        ],
    )
    def test_from_timedelta(self, td, want):
        assert from_timedelta(td).equal(want)
        assert Duration.from_timedelta(td) == want

    def test_date_components_are_zero(self):
        d = from_timedelta(timedelta(days=400))
        assert not d.has_date_part()

    def test_components_share_sign(self):
        d = from_timedelta(timedelta(hours=-1, minutes=-1, seconds=-1.25))
        assert d == Duration(hours=-1, minutes=-1, seconds=-1.25)


class TestRoundTrip:
    @pytest.mark.parametrize(
        "td",
        [
            timedelta(0),
            timedelta(days=3, microseconds=7),
            timedelta(microseconds=-1),
            timedelta(hours=-25, seconds=1.5),
            timedelta(days=9999, seconds=3599, microseconds=999999),
        ],
    )
    def test_timedelta_round_trip(self, td):
        assert to_timedelta(from_timedelta(td)) == td

    @pytest.mark.parametrize(
        "d",
        [
            Duration(),
            Duration(hours=1, minutes=30, seconds=45.5),
            Duration(hours=-2, minutes=-5, seconds=-0.25),
            Duration(seconds=0.5),
            Duration(hours=1000),
        ],
    )
    def test_duration_round_trip(self, d):
        assert from_timedelta(to_timedelta(d)) == d

    def test_not_normalized_input(self):
        assert from_timedelta(to_timedelta(Duration(minutes=90))) == Duration(hours=1, minutes=30)
