from datetime import date
from typing import Dict, Iterable, List

from ycal.models.schemas import SpecialDay

SpecialDayIndex = Dict[date, List[SpecialDay]]


def build_index(special_days: Iterable[SpecialDay]) -> SpecialDayIndex:
    """
    Group special days by exact date. Entries sharing a date accumulate
    in input order; nothing is overwritten or de-duplicated.
    """
    index: SpecialDayIndex = {}
    for entry in special_days:
        index.setdefault(entry.date, []).append(entry)
    return index


def names_for(index: SpecialDayIndex, day: date) -> str:
    return ", ".join(entry.name for entry in index.get(day, []))


def is_holiday(index: SpecialDayIndex, day: date) -> bool:
    return any(entry.is_holiday for entry in index.get(day, []))
