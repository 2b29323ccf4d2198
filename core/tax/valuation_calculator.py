# ================================
# core/tax/valuation_calculator.py
# 評価額・課税標準額からの年税額計算（計算機A）
# ================================

import math
from dataclasses import asdict, dataclass

from config.params import DEFAULT_TAX_RATES, TaxRateParams, ValuationTaxInputs


def floor_to_unit(amount: float, unit: int) -> int:
    """unit 円未満切り捨て（入力は非負を想定）"""
    return math.floor(amount / unit) * unit


@dataclass(frozen=True)
class ValuationTaxBreakdown:
    """
    評価額ベースの計算過程をすべて保持する。
    ①〜④ の各税額は、土地都市計画税（④）以外は切り捨てない。
    """

    ownership_share: float

    # 建物
    building: int                        # 1000円未満切り捨て後の建物評価額
    building_property_tax: float         # ① 建物 × 1.4%
    building_city_planning_tax: float    # ② 建物 × 0.3%

    # 土地 固定資産税
    land_prop_with_share: float          # 課税標準額 × 持分
    land_prop_floored: int               # 1000円未満切り捨て
    land_property_tax: float             # ③ × 1.4%

    # 土地 都市計画税
    land_city_with_share: float
    land_city_floored: int
    land_city_before_floor: float        # × 0.3% ÷ 2
    land_city_planning_tax: int          # ④ 100円未満切り捨て

    total_tax: float                     # ① + ② + ③ + ④
    final_tax: int                       # 100円未満切り捨て（日割りの基礎）

    @property
    def annual_tax(self) -> int:
        return self.final_tax

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_valuation_tax(
    inputs: ValuationTaxInputs,
    rates: TaxRateParams = DEFAULT_TAX_RATES,
) -> ValuationTaxBreakdown:
    share = inputs.ownership_share

    # ---------------------------------------------
    # 建物（1000円未満切り捨て → 税率を掛けるだけ）
    # ---------------------------------------------
    building = floor_to_unit(inputs.building_value, rates.valuation_unit)
    building_property_tax = building * rates.property_tax_rate
    building_city_planning_tax = building * rates.city_planning_tax_rate

    # ---------------------------------------------
    # 土地 固定資産税（持分 → 1000円未満切り捨て → 1.4%）
    # ---------------------------------------------
    land_prop_with_share = inputs.land_property_tax_base * share
    land_prop_floored = floor_to_unit(land_prop_with_share, rates.valuation_unit)
    land_property_tax = land_prop_floored * rates.property_tax_rate

    # ---------------------------------------------
    # 土地 都市計画税（持分 → 1000円未満切り捨て → 0.3% ÷ 2 → 100円未満切り捨て）
    # ---------------------------------------------
    land_city_with_share = inputs.land_city_planning_tax_base * share
    land_city_floored = floor_to_unit(land_city_with_share, rates.valuation_unit)
    land_city_before_floor = (
        land_city_floored * rates.city_planning_tax_rate
    ) / rates.land_city_planning_divisor
    land_city_planning_tax = floor_to_unit(land_city_before_floor, rates.tax_unit)

    total_tax = (
        building_property_tax
        + building_city_planning_tax
        + land_property_tax
        + land_city_planning_tax
    )
    final_tax = floor_to_unit(total_tax, rates.tax_unit)

    return ValuationTaxBreakdown(
        ownership_share=share,
        building=building,
        building_property_tax=building_property_tax,
        building_city_planning_tax=building_city_planning_tax,
        land_prop_with_share=land_prop_with_share,
        land_prop_floored=land_prop_floored,
        land_property_tax=land_property_tax,
        land_city_with_share=land_city_with_share,
        land_city_floored=land_city_floored,
        land_city_before_floor=land_city_before_floor,
        land_city_planning_tax=land_city_planning_tax,
        total_tax=total_tax,
        final_tax=final_tax,
    )

# ================================
# END valuation_calculator.py
# ================================
