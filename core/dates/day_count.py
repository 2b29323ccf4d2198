# ===== core/dates/day_count.py =====

import datetime
from dataclasses import dataclass
from typing import Union

DateLike = Union[datetime.date, datetime.datetime, str]


def is_leap_year(year: int) -> bool:
    """うるう年判定（グレゴリオ暦）"""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def to_closing_date(value: DateLike) -> datetime.date:
    """
    決済日を date に揃える。
    ・datetime → 日付部分のみ
    ・文字列 → ISO形式（YYYY-MM-DD）として解釈
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        return datetime.date.fromisoformat(value.strip()[:10])

    raise TypeError(f"closing date must be date or ISO string, got {type(value)}")


def days_from_new_year(closing_date: DateLike) -> int:
    """
    1月1日から決済日前日までの日数（売主負担日数）。
    1月1日は 0 日目。決済日当日は含めない。
    """
    d = to_closing_date(closing_date)
    return (d - datetime.date(d.year, 1, 1)).days


def remaining_days(closing_date: DateLike) -> int:
    """
    決済日から12月31日までの日数（買主負担日数）。決済日当日を含む。
    """
    d = to_closing_date(closing_date)
    return days_in_year(d.year) - days_from_new_year(d)


@dataclass(frozen=True)
class DayPartition:
    """
    決済日による1年の分割。
    seller_days + buyer_days == days_in_year が常に成り立つ。
    """

    closing_date: datetime.date
    year: int
    days_in_year: int
    seller_days: int     # 1/1〜決済日前日
    buyer_days: int      # 決済日〜12/31
    is_leap_year: bool

    @property
    def seller_ratio(self) -> float:
        return self.seller_days / self.days_in_year

    @property
    def buyer_ratio(self) -> float:
        return self.buyer_days / self.days_in_year


def day_partition(closing_date: DateLike) -> DayPartition:
    d = to_closing_date(closing_date)
    seller_days = days_from_new_year(d)
    return DayPartition(
        closing_date=d,
        year=d.year,
        days_in_year=days_in_year(d.year),
        seller_days=seller_days,
        buyer_days=remaining_days(d),
        is_leap_year=is_leap_year(d.year),
    )

# ===== end day_count.py =====
