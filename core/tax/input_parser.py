# ============================================
# core/tax/input_parser.py
# （フォーム入力の数値化：カンマ除去・整数化・持分）
# ============================================

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional, Union

logger = logging.getLogger(__name__)

# 先頭の空白・符号・数字列だけを読む（"1.9" → 1, "12abc" → 12）
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

Number = Union[int, float]


def parse_int(value: Optional[Union[str, Number]], default: int = 0) -> int:
    """
    文字列の先頭にある整数部分を読み取る。
    数字が無い場合は default を返す（例外は出さない）。
    """
    if value is None:
        return default

    if isinstance(value, bool):
        return int(value)

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return default
        return int(value)

    m = _INT_PREFIX.match(str(value))
    if m is None:
        if str(value).strip():
            logger.debug("Non-numeric input %r coerced to %s", value, default)
        return default

    return int(m.group(1))


def parse_number(value: Optional[Union[str, Number]]) -> int:
    """
    金額入力の数値化。
    カンマ区切りを取り除いてから整数部分を読む。読めなければ 0。
    """
    if isinstance(value, str):
        value = value.replace(",", "")
    return parse_int(value, default=0)


def format_number(value: str) -> str:
    """
    入力欄の表示用にカンマ区切りへ整形する。
    空欄や数値でない入力は、入力されたままの文字列を返す。
    """
    raw = value.replace(",", "")
    if raw.strip() == "" or not _is_numeric(raw):
        return value

    return f"{parse_int(raw):,}"


def _is_numeric(text: str) -> bool:
    if "_" in text:
        return False
    try:
        number = float(text)
    except ValueError:
        return False
    # ".5" のように整数部分が無い表記は整形しない
    return math.isfinite(number) and _INT_PREFIX.match(text) is not None


@dataclass(frozen=True)
class OwnershipShare:
    """持分（分子／分母）。約分はしない。"""

    numerator: int
    denominator: int

    @property
    def value(self) -> float:
        return self.numerator / self.denominator


def parse_ownership(
    numerator: Optional[Union[str, Number]],
    denominator: Optional[Union[str, Number]],
) -> OwnershipShare:
    """
    持分入力の数値化。
    分子は読めなければ 0、分母は読めない場合と 0 の場合に 1。
    """
    num = parse_int(numerator, default=0)
    den = parse_int(denominator, default=1)
    if den == 0:
        logger.debug("Ownership denominator 0 replaced with 1")
        den = 1
    return OwnershipShare(numerator=num, denominator=den)


# ============================================
# END core/tax/input_parser.py
# ============================================
