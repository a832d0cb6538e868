import calendar
from datetime import date
from typing import List


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def build_months(year: int) -> List[List[date]]:
    """
    Every day of the year as 12 ascending lists, January first.
    Expects a year already checked to be in 1..9999.
    """
    return [
        [date(year, month, day) for day in range(1, days_in_month(year, month) + 1)]
        for month in range(1, 13)
    ]
