# ============== ui/app.py ==============

import streamlit as st
import datetime
import traceback
import sys
import os

# ----------------------------------------------------------------------
# パス解決
# ----------------------------------------------------------------------
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
if project_root not in sys.path:
    sys.path.append(project_root)

from config.logging_config import setup_logging
from config.params import (
    DEFAULT_OWNERSHIP_DENOMINATOR,
    CertificateTaxInputs,
    ValuationTaxInputs,
)
from core.engine.proration_engine import ProrationEngine, ProrationReport
from core.reporting.breakdown_table import (
    breakdown_frame,
    proration_frame,
    to_display_frame,
)
from core.reporting.detail_lines import (
    daily_rate_note,
    date_summary_lines,
    payment_caption,
    valuation_detail_lines,
)
from core.reporting.formatting import format_yen
from core.tax.input_parser import format_number

# ----------------------------------------------------------------------
# 共通CSS
# ----------------------------------------------------------------------
CSS = """
<style>
.tp-card {
    padding:14px 18px;
    margin-bottom:12px;
    border-radius:8px;
    border-left:5px solid #999;
}
.tp-card.annual { background:#fff7ed; border-color:#fb923c; color:#c2410c; }
.tp-card.seller { background:#fef2f2; border-color:#f87171; color:#b91c1c; }
.tp-card.buyer  { background:#eff6ff; border-color:#60a5fa; color:#1d4ed8; }
.tp-label { font-weight:700; margin-bottom:4px; }
.tp-value { font-size:1.6rem; font-weight:800; font-variant-numeric: tabular-nums; }
.tp-caption { font-size:0.85rem; color:#555; margin-top:4px; }
.tp-bar { display:flex; height:12px; border-radius:6px; overflow:hidden; background:#e5e7eb; }
.tp-bar .seller { background:#f87171; }
.tp-bar .buyer  { background:#60a5fa; }
</style>
"""


def result_card(kind: str, label: str, value: str, caption: str = "") -> str:
    caption_html = f'<div class="tp-caption">{caption}</div>' if caption else ""
    return f"""
    <div class="tp-card {kind}">
        <div class="tp-label">{label}</div>
        <div class="tp-value">{value}</div>
        {caption_html}
    </div>
    """


def proration_bar(report: ProrationReport) -> str:
    p = report.proration.partition
    return f"""
    <div class="tp-bar">
        <div class="seller" style="width:{p.seller_ratio * 100:.4f}%"></div>
        <div class="buyer" style="width:{p.buyer_ratio * 100:.4f}%"></div>
    </div>
    """


def _reformat(key: str):
    # 入力欄をカンマ区切りへ整形
    st.session_state[key] = format_number(st.session_state.get(key, ""))


def money_input(label: str, key: str, placeholder: str, container=st) -> str:
    return container.text_input(
        label,
        key=key,
        placeholder=placeholder,
        on_change=_reformat,
        args=(key,),
    )


# ----------------------------------------------------------------------
# 1. 決済日
# ----------------------------------------------------------------------
def closing_date_section(key: str) -> datetime.date:
    st.subheader("📅 決済日（所有権移転日）")
    return st.date_input(
        "決済日",
        value=datetime.date.today(),
        key=key,
        label_visibility="collapsed",
    )


def date_summary(report: ProrationReport):
    lines = date_summary_lines(report.proration.partition)
    col_l, col_r = st.columns(2)
    with col_l:
        st.markdown("  \n".join(lines[:2]))
    with col_r:
        st.markdown("  \n".join(lines[2:]))


# ----------------------------------------------------------------------
# 2. 結果・日割りイメージ（両計算機共通）
# ----------------------------------------------------------------------
def results_section(report: ProrationReport, annual_label: str, annual_caption: str = ""):
    p = report.proration.partition
    cols = st.columns(3)
    with cols[0]:
        st.markdown(
            result_card("annual", annual_label, f"{format_yen(report.annual_tax)}円", annual_caption),
            unsafe_allow_html=True,
        )
    with cols[1]:
        st.markdown(
            result_card(
                "seller",
                "売主負担分",
                f"{format_yen(report.seller_payment)}円",
                payment_caption(p.seller_days, seller=True),
            ),
            unsafe_allow_html=True,
        )
    with cols[2]:
        st.markdown(
            result_card(
                "buyer",
                "買主負担分",
                f"{format_yen(report.buyer_payment)}円",
                payment_caption(p.buyer_days, seller=False),
            ),
            unsafe_allow_html=True,
        )

    st.markdown("#### 日割り精算イメージ")
    st.markdown(
        f"**売主負担 {p.seller_days}日** → **買主負担 {p.buyer_days}日**（計 {p.days_in_year}日）"
    )
    st.markdown(proration_bar(report), unsafe_allow_html=True)


def export_section(report: ProrationReport, key: str):
    with st.expander("📊 計算内訳（表・JSON）"):
        st.dataframe(to_display_frame(breakdown_frame(report)), use_container_width=True)
        st.dataframe(to_display_frame(proration_frame(report)), use_container_width=True)
        st.download_button(
            "JSON をダウンロード",
            data=report.to_json(),
            file_name=f"proration_{report.method}_{report.proration.partition.closing_date.isoformat()}.json",
            mime="application/json",
            key=key,
        )


# ----------------------------------------------------------------------
# 3. 計算機A：評価額から計算
# ----------------------------------------------------------------------
def valuation_calculator(engine: ProrationEngine):
    st.caption("不動産取引での税額日割り精算計算")
    closing_date = closing_date_section("val_closing_date")
    date_slot = st.container()

    col_bld, col_land = st.columns(2)
    with col_bld:
        st.subheader("🏠 建物評価額")
        building_value = money_input("建物評価額", "val_building", "12,000,000")
    with col_land:
        st.subheader("📍 土地課税標準額・持分")
        land_prop = money_input("固定資産税課税標準額", "val_land_prop", "600,000,000")
        land_city = money_input("都市計画税課税標準額", "val_land_city", "1,200,000,000")
        st.markdown("持分")
        c_num, c_den = st.columns(2)
        numerator = c_num.text_input("分子", key="val_num", placeholder="10")
        denominator = c_den.text_input(
            "分母", key="val_den", value=str(DEFAULT_OWNERSHIP_DENOMINATOR)
        )

    inputs = ValuationTaxInputs.from_form(
        building_value=building_value,
        land_property_tax_base=land_prop,
        land_city_planning_tax_base=land_city,
        ownership_numerator=numerator,
        ownership_denominator=denominator,
    )
    report = engine.calculate(inputs, closing_date)

    with date_slot:
        date_summary(report)

    st.subheader("計算詳細")
    st.markdown("  \n".join(valuation_detail_lines(report)))

    results_section(report, "年間税額")
    export_section(report, "val_download")


# ----------------------------------------------------------------------
# 4. 計算機B：関係証明書から計算
# ----------------------------------------------------------------------
def certificate_calculator(engine: ProrationEngine):
    st.caption("関係証明書記載の税額から日割り精算計算")
    closing_date = closing_date_section("cert_closing_date")
    date_slot = st.container()

    col_bld, col_land = st.columns(2)
    with col_bld:
        st.subheader("🏠 建物税額")
        bld_prop = money_input("固定資産税", "cert_bld_prop", "168,000")
        bld_city = money_input("都市計画税", "cert_bld_city", "36,000")
        bld_total_slot = st.empty()
    with col_land:
        st.subheader("📍 土地税額")
        land_prop = money_input("固定資産税", "cert_land_prop", "84,000")
        land_city = money_input("都市計画税", "cert_land_city", "36,000")
        land_total_slot = st.empty()

    inputs = CertificateTaxInputs.from_form(
        building_property_tax=bld_prop,
        building_city_planning_tax=bld_city,
        land_property_tax=land_prop,
        land_city_planning_tax=land_city,
    )
    report = engine.calculate(inputs, closing_date)

    with date_slot:
        date_summary(report)
    bld_total_slot.info(f"建物合計: {format_yen(report.breakdown.building_total)}円")
    land_total_slot.success(f"土地合計: {format_yen(report.breakdown.land_total)}円")

    results_section(report, "年間税額（合計金額）", "関係証明書記載額の合計")
    st.caption(daily_rate_note(report))
    export_section(report, "cert_download")


# ----------------------------------------------------------------------
# 5. メイン
# ----------------------------------------------------------------------
def main():
    setup_logging()
    st.set_page_config(layout="wide", page_title="固定資産税・都市計画税 日割り計算")
    st.markdown(CSS, unsafe_allow_html=True)
    st.title("🧮 固定資産税・都市計画税 日割り計算")

    engine = ProrationEngine()
    tabs = st.tabs(["評価額から計算", "📄 固定資産関係証明書から計算"])

    try:
        with tabs[0]:
            valuation_calculator(engine)
        with tabs[1]:
            certificate_calculator(engine)
    except Exception as e:
        st.error(f"計算エラー: {str(e)}")
        st.code(traceback.format_exc())


if __name__ == "__main__":
    main()

# ============== ui/app.py ==============　end
