# ============================================
# core/tax/proration.py
# （年税額の日割り精算：売主／買主）
# ============================================

import math
from dataclasses import asdict, dataclass

from core.dates.day_count import DateLike, DayPartition, day_partition


def round_half_up(value: float) -> int:
    """
    四捨五入（0.5 は切り上げ）。
    Python の round() は偶数丸めのため使わない。
    """
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class ProrationResult:
    """
    日割り精算の結果。
    売主・買主をそれぞれ独立に四捨五入するため、
    seller_payment + buyer_payment は年税額と ±1円 ずれることがある（補正しない）。
    """

    annual_tax: float
    partition: DayPartition
    daily_rate: float
    seller_payment: int
    buyer_payment: int

    @property
    def rounding_difference(self) -> float:
        return self.seller_payment + self.buyer_payment - self.annual_tax

    def to_dict(self) -> dict:
        d = asdict(self)
        d["partition"]["closing_date"] = self.partition.closing_date.isoformat()
        d["rounding_difference"] = self.rounding_difference
        return d


def prorate(annual_tax: float, closing_date: DateLike) -> ProrationResult:
    partition = day_partition(closing_date)

    # 1日あたりの税額（丸めない）
    daily_rate = annual_tax / partition.days_in_year

    return ProrationResult(
        annual_tax=annual_tax,
        partition=partition,
        daily_rate=daily_rate,
        seller_payment=round_half_up(daily_rate * partition.seller_days),
        buyer_payment=round_half_up(daily_rate * partition.buyer_days),
    )

# ============================================
# END core/tax/proration.py
# ============================================
