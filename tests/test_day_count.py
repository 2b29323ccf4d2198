"""
Unit Tests for closing-date day counting

Seller days run from Jan 1 up to the day before closing; buyer days run
from the closing date through Dec 31.
"""

import datetime

import pytest

from core.dates.day_count import (
    day_partition,
    days_from_new_year,
    days_in_year,
    is_leap_year,
    remaining_days,
    to_closing_date,
)


class TestLeapYear:
    """Gregorian leap-year rule."""

    @pytest.mark.parametrize(
        "year, expected",
        [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False), (2400, True)],
    )
    def test_is_leap_year(self, year, expected):
        assert is_leap_year(year) is expected

    def test_days_in_year(self):
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365
        assert days_in_year(1900) == 365


class TestDaysFromNewYear:
    """Day counts around the year boundaries."""

    def test_new_years_day_is_day_zero(self):
        assert days_from_new_year("2024-01-01") == 0
        assert remaining_days("2024-01-01") == 366

    def test_new_years_eve(self):
        assert days_from_new_year("2024-12-31") == 365
        assert remaining_days("2024-12-31") == 1
        assert days_from_new_year("2023-12-31") == 364
        assert remaining_days("2023-12-31") == 1

    def test_after_leap_day(self):
        # 31 + 29 + 31
        assert days_from_new_year(datetime.date(2024, 4, 1)) == 91
        assert remaining_days(datetime.date(2024, 4, 1)) == 275

    def test_accepts_datetime(self):
        dt = datetime.datetime(2023, 7, 1, 23, 59)
        assert days_from_new_year(dt) == 181

    @pytest.mark.parametrize("year", [1900, 2000, 2023, 2024])
    def test_partition_covers_whole_year(self, year):
        d = datetime.date(year, 1, 1)
        while d.year == year:
            assert days_from_new_year(d) + remaining_days(d) == days_in_year(year)
            d += datetime.timedelta(days=1)


class TestDayPartition:
    """DayPartition bundles the split used for proration."""

    def test_fields(self):
        p = day_partition("2024-04-01")
        assert p.closing_date == datetime.date(2024, 4, 1)
        assert p.year == 2024
        assert p.days_in_year == 366
        assert p.seller_days == 91
        assert p.buyer_days == 275
        assert p.is_leap_year is True

    def test_ratios_sum_to_one(self):
        p = day_partition("2023-07-01")
        assert p.seller_ratio + p.buyer_ratio == pytest.approx(1.0)
        assert p.seller_ratio == pytest.approx(181 / 365)


class TestToClosingDate:

    def test_iso_string(self):
        assert to_closing_date(" 2024-02-29 ") == datetime.date(2024, 2, 29)

    def test_iso_datetime_string_keeps_date_part(self):
        assert to_closing_date("2024-02-29T10:00:00") == datetime.date(2024, 2, 29)

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            to_closing_date("2023-02-29")

    def test_invalid_type_raises(self):
        with pytest.raises(TypeError):
            to_closing_date(20240101)
