# ===============================================
# core/tax/certificate_calculator.py
# ===============================================

from dataclasses import asdict, dataclass

from config.params import CertificateTaxInputs


@dataclass(frozen=True)
class CertificateTaxBreakdown:
    building_property_tax: float
    building_city_planning_tax: float
    land_property_tax: float
    land_city_planning_tax: float

    building_total: float   # 建物合計
    land_total: float       # 土地合計
    total_tax: float        # 年間税額（関係証明書記載額の合計）

    @property
    def annual_tax(self) -> float:
        return self.total_tax

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_certificate_tax(inputs: CertificateTaxInputs) -> CertificateTaxBreakdown:
    """
    関係証明書記載の税額を合計する（計算機B）。
    証明書の金額は課税庁側で端数処理済みのため、ここでは丸めない。
    """
    building_total = inputs.building_property_tax + inputs.building_city_planning_tax
    land_total = inputs.land_property_tax + inputs.land_city_planning_tax

    return CertificateTaxBreakdown(
        building_property_tax=inputs.building_property_tax,
        building_city_planning_tax=inputs.building_city_planning_tax,
        land_property_tax=inputs.land_property_tax,
        land_city_planning_tax=inputs.land_city_planning_tax,
        building_total=building_total,
        land_total=land_total,
        total_tax=building_total + land_total,
    )

# certificate_calculator.py end
