"""
Nager.Date Holiday Source
=========================
Public holidays from https://date.nager.at

  GET /api/v3/PublicHolidays/{year}/{countryCode}

Response: JSON array of
  date       — "YYYY-MM-DD"
  localName  — name in the country's language (used as display name)
  name       — English name (ignored)
  countryCode, fixed, global, counties, launchYear, types (ignored)
"""

import httpx
import logging
import os
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from ycal.holidays.base import BaseHolidaySource, HolidayFetchError, HolidayParseError
from ycal.models.schemas import NagerHoliday, SpecialDay

logger = logging.getLogger(__name__)

API_URL = os.getenv("YCAL_HOLIDAY_API_URL", "https://date.nager.at/api/v3/PublicHolidays")
TIMEOUT = float(os.getenv("YCAL_HOLIDAY_TIMEOUT", "15"))

HEADERS = {
    "User-Agent": "ycal/1.0",
    "Accept":     "application/json",
}

_holidays_adapter = TypeAdapter(List[NagerHoliday])


class NagerHolidaySource(BaseHolidaySource):
    source_id   = "nager"
    source_name = "Nager.Date"

    def __init__(self, base_url: str = API_URL, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    async def fetch_holidays(self, year: int, country_code: str) -> List[SpecialDay]:
        url = f"{self.base_url}/{year}/{country_code.upper()}"

        try:
            async with httpx.AsyncClient(timeout=TIMEOUT, transport=self._transport) as client:
                resp = await client.get(url, headers=HEADERS)
                resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"[Nager] Request for {country_code} {year} failed: {e}")
            raise HolidayFetchError(e) from e

        try:
            holidays = _holidays_adapter.validate_json(resp.content)
        except ValidationError as e:
            logger.error(f"[Nager] Unexpected response for {country_code} {year}: {e}")
            raise HolidayParseError(e) from e

        logger.info(f"[Nager] {len(holidays)} holidays fetched for {country_code} {year}.")
        return [
            SpecialDay(date=h.date, name=h.local_name, is_holiday=True)
            for h in holidays
        ]
