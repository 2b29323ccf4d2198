#==== core/engine/proration_engine.py ====

import json
import logging
from dataclasses import dataclass
from typing import Union

from config.params import (
    DEFAULT_TAX_RATES,
    CertificateTaxInputs,
    TaxInputs,
    TaxRateParams,
    ValuationTaxInputs,
)
from core.dates.day_count import DateLike
from core.tax.certificate_calculator import CertificateTaxBreakdown, calculate_certificate_tax
from core.tax.proration import ProrationResult, prorate
from core.tax.valuation_calculator import ValuationTaxBreakdown, calculate_valuation_tax

logger = logging.getLogger(__name__)

TaxBreakdown = Union[ValuationTaxBreakdown, CertificateTaxBreakdown]


@dataclass(frozen=True)
class ProrationReport:
    """
    1回の計算結果（入力 → 年税額の内訳 → 日割り精算）。
    画面表示・JSON出力の両方にそのまま使う。
    """

    method: str                 # "valuation" | "certificate"
    inputs: TaxInputs
    breakdown: TaxBreakdown
    proration: ProrationResult

    @property
    def annual_tax(self) -> float:
        return self.breakdown.annual_tax

    @property
    def seller_payment(self) -> int:
        return self.proration.seller_payment

    @property
    def buyer_payment(self) -> int:
        return self.proration.buyer_payment

    def to_dict(self) -> dict:
        return {
            "method": self.method,
            "closing_date": self.proration.partition.closing_date.isoformat(),
            "breakdown": self.breakdown.to_dict(),
            "proration": self.proration.to_dict(),
            "annual_tax": self.annual_tax,
            "seller_payment": self.seller_payment,
            "buyer_payment": self.buyer_payment,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)


class ProrationEngine:
    """
    以下のコードでは、決済日と入力値から年税額を求め、
    売主・買主の日割り負担額までを一括で計算するエンジンを定義している。
    状態は持たず、呼ばれるたびに全項目を計算し直す。
    """

    # 以下のコードでは、税率パラメータ（既定は標準税率）を設定している
    def __init__(self, rates: TaxRateParams = DEFAULT_TAX_RATES):
        self.rates = rates

    def calculate(self, inputs: TaxInputs, closing_date: DateLike) -> ProrationReport:
        """
        入力の種類（評価額ベース／関係証明書ベース）に応じて計算を振り分ける。

        :param inputs: ValuationTaxInputs または CertificateTaxInputs
        :param closing_date: 決済日（所有権移転日）
        :return: ProrationReport
        """
        if isinstance(inputs, ValuationTaxInputs):
            return self.calculate_valuation(inputs, closing_date)
        if isinstance(inputs, CertificateTaxInputs):
            return self.calculate_certificate(inputs, closing_date)

        raise TypeError(
            f"ProrationEngine.calculate expects ValuationTaxInputs or "
            f"CertificateTaxInputs, got {type(inputs)}"
        )

    def calculate_valuation(
        self, inputs: ValuationTaxInputs, closing_date: DateLike
    ) -> ProrationReport:
        # 以下のコードでは、100円未満切り捨て後の年税額を日割りの基礎にしている
        breakdown = calculate_valuation_tax(inputs, self.rates)
        proration = prorate(breakdown.final_tax, closing_date)
        self._log(breakdown.final_tax, proration)

        return ProrationReport(
            method="valuation",
            inputs=inputs,
            breakdown=breakdown,
            proration=proration,
        )

    def calculate_certificate(
        self, inputs: CertificateTaxInputs, closing_date: DateLike
    ) -> ProrationReport:
        # 以下のコードでは、証明書記載額の合計をそのまま日割りの基礎にしている
        breakdown = calculate_certificate_tax(inputs)
        proration = prorate(breakdown.total_tax, closing_date)
        self._log(breakdown.total_tax, proration)

        return ProrationReport(
            method="certificate",
            inputs=inputs,
            breakdown=breakdown,
            proration=proration,
        )

    @staticmethod
    def _log(annual_tax: float, proration: ProrationResult) -> None:
        p = proration.partition
        logger.debug(
            "Prorated %s yen at %s: seller %d days -> %d, buyer %d days -> %d",
            annual_tax,
            p.closing_date.isoformat(),
            p.seller_days,
            proration.seller_payment,
            p.buyer_days,
            proration.buyer_payment,
        )
        if proration.rounding_difference:
            logger.debug("Rounding difference %+g yen left unreconciled",
                         proration.rounding_difference)

#======= 以上, core/engine/proration_engine.py end ======
