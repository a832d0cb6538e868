"""
Holiday source registry — maps source_id to connector instance.

To add a new source:
  1. Create ycal/holidays/yoursource.py extending BaseHolidaySource
  2. Import it here and add it to SOURCES
"""

from typing import List, Optional

from ycal.core.locales import normalize_locale
from ycal.holidays.base import (
    BaseHolidaySource, HolidayError, HolidayFetchError, HolidayParseError,
)
from ycal.holidays.nager import NagerHolidaySource
from ycal.models.schemas import SpecialDay

DEFAULT_SOURCE = "nager"


# ── Registry ──────────────────────────────────
SOURCES: dict[str, BaseHolidaySource] = {
    "nager": NagerHolidaySource(),
}


def get_source(source_id: str = DEFAULT_SOURCE) -> BaseHolidaySource | None:
    return SOURCES.get(source_id)


def country_from_locale(locale: str) -> Optional[str]:
    """ "en-GB" → "GB"; None when the code carries no region. """
    parts = normalize_locale(locale).split("_")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1].upper()


def merge_special_days(
    public_holidays: List[SpecialDay], user_days: List[SpecialDay],
) -> List[SpecialDay]:
    """
    Fetched holidays first, then the user's own entries. Same-date entries
    from both lists are all kept, so their names are joined on display.
    """
    return list(public_holidays) + list(user_days)


__all__ = [
    "BaseHolidaySource", "HolidayError", "HolidayFetchError", "HolidayParseError",
    "NagerHolidaySource", "SOURCES", "country_from_locale", "get_source",
    "merge_special_days",
]
