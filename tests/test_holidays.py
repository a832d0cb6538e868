import asyncio
import json
from datetime import date

import httpx
import pytest

from ycal.holidays import (
    HolidayFetchError, HolidayParseError, NagerHolidaySource,
    country_from_locale, get_source, merge_special_days,
)
from ycal.models.schemas import SpecialDay

NAGER_GB_2024 = [
    {"date": "2024-01-01", "localName": "New Year's Day", "name": "New Year's Day",
     "countryCode": "GB", "fixed": False, "global": True, "counties": None,
     "launchYear": None, "types": ["Public"]},
    {"date": "2024-12-25", "localName": "Christmas Day", "name": "Christmas Day",
     "countryCode": "GB", "fixed": False, "global": True, "counties": None,
     "launchYear": None, "types": ["Public"]},
]


def _source(handler):
    return NagerHolidaySource(base_url="https://nager.test/api/v3/PublicHolidays",
                              transport=httpx.MockTransport(handler))


def test_fetch_maps_entries_to_holidays():
    seen = []

    def handler(request):
        seen.append(request.url.path)
        return httpx.Response(200, content=json.dumps(NAGER_GB_2024))

    days = asyncio.run(_source(handler).fetch_holidays(2024, "gb"))
    assert seen == ["/api/v3/PublicHolidays/2024/GB"]
    assert days == [
        SpecialDay(date=date(2024, 1, 1), name="New Year's Day", is_holiday=True),
        SpecialDay(date=date(2024, 12, 25), name="Christmas Day", is_holiday=True),
    ]


def test_http_error_is_a_fetch_error():
    source = _source(lambda request: httpx.Response(404))
    with pytest.raises(HolidayFetchError) as exc_info:
        asyncio.run(source.fetch_holidays(2024, "ZZ"))
    assert str(exc_info.value).startswith("failed to fetch holidays:")


def test_connection_error_is_a_fetch_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(HolidayFetchError):
        asyncio.run(_source(handler).fetch_holidays(2024, "GB"))


@pytest.mark.parametrize("body", ["not json", '{"date": "2024-01-01"}', '[{"date": "soon"}]'])
def test_bad_body_is_a_parse_error(body):
    source = _source(lambda request: httpx.Response(200, content=body))
    with pytest.raises(HolidayParseError) as exc_info:
        asyncio.run(source.fetch_holidays(2024, "GB"))
    assert str(exc_info.value).startswith("failed to parse holidays:")


@pytest.mark.parametrize("locale, country", [
    ("en-GB", "GB"), ("sv_SE", "SE"), ("de-at", "AT"), ("en", None), ("", None),
])
def test_country_from_locale(locale, country):
    assert country_from_locale(locale) == country


def test_merge_keeps_both_sources_without_dedup():
    fetched = [SpecialDay(date=date(2024, 12, 25), name="Christmas Day", is_holiday=True)]
    mine = [SpecialDay(date=date(2024, 12, 25), name="Christmas", is_holiday=False)]
    assert [d.name for d in merge_special_days(fetched, mine)] == ["Christmas Day", "Christmas"]


def test_registry():
    assert isinstance(get_source(), NagerHolidaySource)
    assert get_source("missing") is None
