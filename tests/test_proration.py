"""
Unit Tests for daily proration

Seller and buyer shares are rounded half-up independently; any ±1 yen
residual against the annual tax is left as is.
"""

import pytest

from core.tax.proration import prorate, round_half_up


class TestRoundHalfUp:

    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (91.5, 92), (0.0, 0), (54699.45, 54699)],
    )
    def test_round(self, value, expected):
        assert round_half_up(value) == expected


class TestProrate:

    def test_leap_year_split(self):
        result = prorate(220_000, "2024-04-01")
        assert result.partition.seller_days == 91
        assert result.partition.buyer_days == 275
        assert result.daily_rate == pytest.approx(220_000 / 366)
        assert result.seller_payment == 54_699
        assert result.buyer_payment == 165_301
        assert result.rounding_difference == 0

    def test_certificate_total_split(self):
        result = prorate(324_000, "2024-04-01")
        assert result.seller_payment == 80_557
        assert result.buyer_payment == 243_443

    def test_common_year_split(self):
        result = prorate(324_000, "2023-07-01")
        assert result.partition.days_in_year == 365
        assert result.seller_payment == 160_668
        assert result.buyer_payment == 163_332

    def test_new_years_day_buyer_pays_all(self):
        result = prorate(100_000, "2023-01-01")
        assert result.seller_payment == 0
        assert result.buyer_payment == 100_000

    def test_new_years_eve_buyer_pays_one_day(self):
        result = prorate(36_500, "2023-12-31")
        assert result.seller_payment == 36_400
        assert result.buyer_payment == 100

    def test_residual_is_not_reconciled(self):
        # 183 / 366 * 183 = 91.5 が双方で切り上がる
        result = prorate(183, "2024-07-02")
        assert result.partition.seller_days == 183
        assert result.seller_payment == 92
        assert result.buyer_payment == 92
        assert result.rounding_difference == 1

    @pytest.mark.parametrize(
        "annual_tax, closing_date",
        [
            (220_000, "2024-04-01"),
            (324_000, "2023-07-01"),
            (123_400, "2023-02-28"),
            (987_600, "2024-02-29"),
            (100, "2023-10-10"),
        ],
    )
    def test_each_share_within_one_yen(self, annual_tax, closing_date):
        result = prorate(annual_tax, closing_date)
        p = result.partition
        assert abs(result.seller_payment - annual_tax * p.seller_days / p.days_in_year) <= 1
        assert abs(result.buyer_payment - annual_tax * p.buyer_days / p.days_in_year) <= 1
        assert abs(result.rounding_difference) <= 1

    def test_zero_tax(self):
        result = prorate(0, "2024-06-15")
        assert result.seller_payment == 0
        assert result.buyer_payment == 0

    def test_to_dict_serializes_date(self):
        d = prorate(220_000, "2024-04-01").to_dict()
        assert d["partition"]["closing_date"] == "2024-04-01"
        assert d["seller_payment"] == 54_699
        assert d["rounding_difference"] == 0
