# ============================================
# core/reporting/detail_lines.py
# 「計算詳細」欄の表示文字列
# ============================================

import math
from typing import List

from core.dates.day_count import DayPartition
from core.engine.proration_engine import ProrationReport
from core.reporting.formatting import format_daily_rate, format_share, format_yen
from core.tax.proration import round_half_up


def date_summary_lines(partition: DayPartition) -> List[str]:
    """
    決済日欄の説明（経過日数・年間日数・負担日数）
    """
    leap = "（うるう年）" if partition.is_leap_year else ""
    return [
        f"{partition.year}年1月1日から {partition.seller_days}日目",
        f"年間日数: {partition.days_in_year}日 {leap}".rstrip(),
        f"売主負担: {partition.seller_days}日",
        f"買主負担: {partition.buyer_days}日",
    ]


def building_lines(report: ProrationReport) -> List[str]:
    b = report.breakdown
    heading = "【建物】"
    if b.building > 0:
        heading += f"{format_yen(b.building)}円（1000円未満切り捨て後）"
    return [
        heading,
        f"{format_yen(b.building)} × 1.4% = {format_yen(b.building_property_tax)}円 ①",
        f"{format_yen(b.building)} × 0.3% = {format_yen(b.building_city_planning_tax)}円 ②",
    ]


def land_lines(report: ProrationReport) -> List[str]:
    b = report.breakdown
    inputs = report.inputs
    share = format_share(b.ownership_share)

    return [
        f"【土地】持分 {inputs.ownership_numerator}/{inputs.ownership_denominator}",
        "固定資産税:",
        f"{share} × {format_yen(inputs.land_property_tax_base)} = "
        f"{format_yen(math.floor(b.land_prop_with_share))}円",
        f"{format_yen(b.land_prop_floored)}円（1000円未満切り捨て）",
        f"{format_yen(b.land_prop_floored)} × 1.4% = {format_yen(b.land_property_tax)}円 ③",
        "都市計画税:",
        f"{share} × {format_yen(inputs.land_city_planning_tax_base)} = "
        f"{format_yen(math.floor(b.land_city_with_share))}円",
        f"{format_yen(b.land_city_floored)}円（1000円未満切り捨て）",
        f"{format_yen(b.land_city_floored)} × 0.3% ÷ 2 = "
        f"{format_yen(round_half_up(b.land_city_before_floor))}円 → "
        f"{format_yen(b.land_city_planning_tax)}円 ④（100円未満切り捨て）",
    ]


def total_lines(report: ProrationReport) -> List[str]:
    b = report.breakdown
    return [
        f"① + ② + ③ + ④ = {format_yen(round_half_up(b.total_tax))}円",
        f"100円未満切り捨て後: {format_yen(b.final_tax)}円",
    ]


def valuation_detail_lines(report: ProrationReport) -> List[str]:
    """評価額ベースの計算詳細（建物 → 土地 → 合計）"""
    return building_lines(report) + land_lines(report) + total_lines(report)


def daily_rate_note(report: ProrationReport) -> str:
    return (
        f"1日あたり: {format_daily_rate(report.proration.daily_rate)}円 × 日数 "
        f"= 負担額（四捨五入）"
    )


def payment_caption(days: int, seller: bool) -> str:
    period = "1/1〜決済日前日" if seller else "決済日〜12/31"
    return f"{days}日分（{period}）"

# ============================================
# END core/reporting/detail_lines.py
# ============================================
