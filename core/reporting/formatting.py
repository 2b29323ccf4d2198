#============== core/reporting/formatting.py

import math

import numpy as np
import pandas as pd


def format_yen(value) -> str:
    """
    金額の表示用（3桁カンマ区切り）。
    整数値は小数点なし、端数がある場合は小数第3位まで（末尾の0は省く）。
    """
    if value is None or pd.isna(value):
        return ""
    if isinstance(value, (np.integer, np.floating)):
        value = value.item()
    if isinstance(value, int) or float(value).is_integer():
        return f"{int(value):,}"

    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return text


def format_share(value: float) -> str:
    # 持分は小数第4位まで
    return f"{value:.4f}"


def format_daily_rate(value: float) -> str:
    return f"{value:.2f}"


def format_cell(val) -> str:
    # DataFrame 表示用。数値は四捨五入して整数表示
    if val is None or pd.isna(val) or (isinstance(val, float) and np.isnan(val)):
        return ""
    if isinstance(val, (int, float, np.integer, np.floating)):
        if isinstance(val, (float, np.floating)) and not math.isfinite(val):
            return str(val)
        return f"{math.floor(float(val) + 0.5):,}"
    return str(val)

#============== end core/reporting/formatting.py
