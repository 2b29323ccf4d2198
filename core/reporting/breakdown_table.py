#============== core/reporting/breakdown_table.py

from typing import Iterable, Optional

import pandas as pd

from core.engine.proration_engine import ProrationReport
from core.reporting.formatting import format_cell

AMOUNT_COL = "金額"

# 評価額ベース：表示ラベル → breakdown の属性名
VALUATION_ROWS = [
    ("建物評価額（1000円未満切り捨て）", "building"),
    ("① 建物 固定資産税", "building_property_tax"),
    ("② 建物 都市計画税", "building_city_planning_tax"),
    ("土地 固定資産税課税標準額 × 持分", "land_prop_with_share"),
    ("土地 固定資産税課税標準（1000円未満切り捨て）", "land_prop_floored"),
    ("③ 土地 固定資産税", "land_property_tax"),
    ("土地 都市計画税課税標準額 × 持分", "land_city_with_share"),
    ("土地 都市計画税課税標準（1000円未満切り捨て）", "land_city_floored"),
    ("土地 都市計画税（切り捨て前）", "land_city_before_floor"),
    ("④ 土地 都市計画税", "land_city_planning_tax"),
    ("① + ② + ③ + ④", "total_tax"),
    ("年間税額（100円未満切り捨て）", "final_tax"),
]

CERTIFICATE_ROWS = [
    ("建物 固定資産税", "building_property_tax"),
    ("建物 都市計画税", "building_city_planning_tax"),
    ("建物合計", "building_total"),
    ("土地 固定資産税", "land_property_tax"),
    ("土地 都市計画税", "land_city_planning_tax"),
    ("土地合計", "land_total"),
    ("年間税額（合計金額）", "total_tax"),
]


def _make_frame(report: ProrationReport, rows) -> pd.DataFrame:
    labels = [label for label, _ in rows]
    values = [getattr(report.breakdown, attr) for _, attr in rows]
    df = pd.DataFrame({AMOUNT_COL: values}, index=labels).astype("Float64")
    df.index.name = "項目"
    return df


def valuation_breakdown_frame(report: ProrationReport) -> pd.DataFrame:
    return _make_frame(report, VALUATION_ROWS)


def certificate_breakdown_frame(report: ProrationReport) -> pd.DataFrame:
    return _make_frame(report, CERTIFICATE_ROWS)


def breakdown_frame(report: ProrationReport) -> pd.DataFrame:
    if report.method == "valuation":
        return valuation_breakdown_frame(report)
    return certificate_breakdown_frame(report)


def proration_frame(report: ProrationReport) -> pd.DataFrame:
    """
    売主・買主の負担日数と負担額
    """
    p = report.proration.partition
    df = pd.DataFrame(
        {
            "期間": ["1/1〜決済日前日", "決済日〜12/31"],
            "日数": [p.seller_days, p.buyer_days],
            "割合": [p.seller_ratio, p.buyer_ratio],
            "負担額": [report.seller_payment, report.buyer_payment],
        },
        index=["売主", "買主"],
    )
    df.index.name = "負担者"
    return df


def to_display_frame(
    df: pd.DataFrame, num_cols: Optional[Iterable[str]] = None
) -> pd.DataFrame:
    """
    数値列をカンマ区切りの文字列へ変換した表示用 DataFrame を返す。
    num_cols 省略時は 金額・負担額 の列を対象にする。
    """
    df_display = df.copy()
    if num_cols is None:
        num_cols = [c for c in df_display.columns if c in (AMOUNT_COL, "負担額", "日数")]

    for col in num_cols:
        df_display[col] = df_display[col].astype(object).apply(format_cell)

    if "割合" in df_display.columns:
        df_display["割合"] = df_display["割合"].apply(lambda r: f"{r:.1%}")

    return df_display

#============== end core/reporting/breakdown_table.py
