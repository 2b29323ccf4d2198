#=========== config/params.py

from dataclasses import dataclass
from typing import Optional, Union

from core.tax.input_parser import parse_number, parse_ownership

DEFAULT_OWNERSHIP_DENOMINATOR = 10000


@dataclass(frozen=True)
class TaxRateParams:
    # 税率（標準税率・ハードコード）
    property_tax_rate: float = 0.014         # 固定資産税 1.4%
    city_planning_tax_rate: float = 0.003    # 都市計画税 0.3%
    land_city_planning_divisor: int = 2      # 土地の都市計画税は 1/2

    # 端数処理の単位
    valuation_unit: int = 1000               # 課税標準額：1000円未満切り捨て
    tax_unit: int = 100                      # 税額：100円未満切り捨て


DEFAULT_TAX_RATES = TaxRateParams()


@dataclass(frozen=True)
class ValuationTaxInputs:
    """
    評価額ベース（計算機A）の入力値。
    持分は分子／分母をそのまま保持する（約分しない）。
    """

    building_value: float = 0              # 建物評価額
    land_property_tax_base: float = 0      # 土地 固定資産税課税標準額
    land_city_planning_tax_base: float = 0 # 土地 都市計画税課税標準額
    ownership_numerator: int = 0
    ownership_denominator: int = DEFAULT_OWNERSHIP_DENOMINATOR

    @property
    def ownership_share(self) -> float:
        # 分母 0 は 1 として扱う（ゼロ除算防止）
        denominator = self.ownership_denominator or 1
        return self.ownership_numerator / denominator

    @classmethod
    def from_form(
        cls,
        building_value: Optional[str] = "",
        land_property_tax_base: Optional[str] = "",
        land_city_planning_tax_base: Optional[str] = "",
        ownership_numerator: Optional[str] = "",
        ownership_denominator: Optional[str] = str(DEFAULT_OWNERSHIP_DENOMINATOR),
    ) -> "ValuationTaxInputs":
        """
        フォームの文字列入力から生成する。
        数値にならない入力は 0（分母は 1）に読み替え、例外は出さない。
        """
        share = parse_ownership(ownership_numerator, ownership_denominator)
        return cls(
            building_value=parse_number(building_value),
            land_property_tax_base=parse_number(land_property_tax_base),
            land_city_planning_tax_base=parse_number(land_city_planning_tax_base),
            ownership_numerator=share.numerator,
            ownership_denominator=share.denominator,
        )


@dataclass(frozen=True)
class CertificateTaxInputs:
    """
    関係証明書ベース（計算機B）の入力値。
    証明書記載の年税額（端数処理済み）をそのまま使う。
    """

    building_property_tax: float = 0        # 家屋 固定資産税
    building_city_planning_tax: float = 0   # 家屋 都市計画税
    land_property_tax: float = 0            # 土地 固定資産税
    land_city_planning_tax: float = 0       # 土地 都市計画税

    @classmethod
    def from_form(
        cls,
        building_property_tax: Optional[str] = "",
        building_city_planning_tax: Optional[str] = "",
        land_property_tax: Optional[str] = "",
        land_city_planning_tax: Optional[str] = "",
    ) -> "CertificateTaxInputs":
        return cls(
            building_property_tax=parse_number(building_property_tax),
            building_city_planning_tax=parse_number(building_city_planning_tax),
            land_property_tax=parse_number(land_property_tax),
            land_city_planning_tax=parse_number(land_city_planning_tax),
        )


TaxInputs = Union[ValuationTaxInputs, CertificateTaxInputs]

#=========== end params.py
