"""Utility function tests."""

from datetime import timedelta

from pyisoduration._types import Component
from pyisoduration._utils import build_iso8601, format_magnitude, split_elapsed


class TestSplitElapsed:
    def test_normalizes_minutes(self):
        assert split_elapsed(timedelta(minutes=90)) == (
            False,
            {Component.HOURS: 1, Component.MINUTES: 30},
        )

    def test_all_parts(self):
        value = timedelta(days=1, hours=2, minutes=3, seconds=4)
        assert split_elapsed(value) == (
            False,
            {
                Component.DAYS: 1,
                Component.HOURS: 2,
                Component.MINUTES: 3,
                Component.SECONDS: 4,
            },
        )

    def test_zero(self):
        assert split_elapsed(timedelta(0)) == (False, {})

    def test_microseconds(self):
        assert split_elapsed(timedelta(seconds=2, microseconds=250000)) == (
            False,
            {Component.SECONDS: 2.25},
        )

    def test_negative_uses_magnitude(self):
        assert split_elapsed(timedelta(hours=-25)) == (
            True,
            {Component.DAYS: 1, Component.HOURS: 1},
        )


class TestFormatMagnitude:
    def test_int(self):
        assert format_magnitude(12) == "12"

    def test_integral_float(self):
        assert format_magnitude(2.0) == "2"

    def test_fraction(self):
        assert format_magnitude(0.25) == "0.25"

    def test_no_exponent(self):
        assert format_magnitude(0.000001) == "0.000001"

    def test_keeps_digits_below_nanoseconds(self):
        assert format_magnitude(1e-10) == "0.0000000001"

    def test_keeps_all_significant_digits(self):
        assert format_magnitude(1.0000000001) == "1.0000000001"


class TestBuildISO8601:
    def test_date_and_time(self):
        parts = [(Component.DAYS, 1), (Component.HOURS, 2)]
        assert build_iso8601(parts) == "P1DT2H"

    def test_skips_zero(self):
        parts = [(Component.DAYS, 0), (Component.MINUTES, 5)]
        assert build_iso8601(parts) == "PT5M"

    def test_empty(self):
        assert build_iso8601([]) == "PT0S"

    def test_negative(self):
        assert build_iso8601([(Component.SECONDS, 3)], negative=True) == "-PT3S"

    def test_minutes_and_months_share_designator(self):
        parts = [(Component.MONTHS, 1), (Component.MINUTES, 1)]
        assert build_iso8601(parts) == "P1MT1M"
