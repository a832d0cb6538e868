from abc import ABC, abstractmethod
from typing import List

from ycal.models.schemas import SpecialDay


class HolidayError(Exception):
    """A public-holiday source could not deliver."""


class HolidayFetchError(HolidayError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"failed to fetch holidays: {cause}")


class HolidayParseError(HolidayError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"failed to parse holidays: {cause}")


class BaseHolidaySource(ABC):
    """
    Abstract base class for public-holiday sources.
    Add a new source by creating a file in ycal/holidays/ and extending this class.
    """
    source_id: str
    source_name: str

    @abstractmethod
    async def fetch_holidays(self, year: int, country_code: str) -> List[SpecialDay]:
        """Every public holiday of the year, as SpecialDay entries with is_holiday=True."""
