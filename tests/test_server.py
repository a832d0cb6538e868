import json
from datetime import date

import pytest
from fastapi.testclient import TestClient

from ycal import holidays
from ycal.holidays import BaseHolidaySource, HolidayFetchError
from ycal.main import app
from ycal.models.schemas import SpecialDay


class FakeSource(BaseHolidaySource):
    source_id = "nager"
    source_name = "Fake"

    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    async def fetch_holidays(self, year, country_code):
        self.calls.append((year, country_code))
        if self.fail:
            raise HolidayFetchError(RuntimeError("boom"))
        return [SpecialDay(date=date(year, 12, 25), name="Christmas Day", is_holiday=True)]


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fake_source(monkeypatch):
    source = FakeSource()
    monkeypatch.setitem(holidays.SOURCES, "nager", source)
    return source


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_shell_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert 'action="/calendar"' in resp.text


def test_themes(client):
    assert client.get("/themes").json() == ["contemporary", "minimalist", "retro"]


def test_calendar_html(client):
    resp = client.get("/calendar", params={"year": 2024, "theme": "retro", "day_name_characters": 2})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.text.count('<li class="day') == 366
    assert "Courier New" in resp.text


def test_calendar_defaults_to_current_year(client):
    resp = client.get("/calendar")
    assert resp.status_code == 200
    assert f"<title>{date.today().year}</title>" in resp.text


def test_special_days_query(client):
    special = [
        {"date": "2024-12-25", "name": "Christmas", "is_holiday": True},
        {"date": "2024-12-25", "name": "Office Closure", "is_holiday": False},
    ]
    resp = client.get("/calendar", params={"year": 2024, "special_days": json.dumps(special)})
    assert resp.status_code == 200
    assert "Christmas, Office Closure" in resp.text


@pytest.mark.parametrize("params, message", [
    ({"year": 0}, "Error: year must be between 1 and 9999, got 0"),
    ({"year": 10000}, "Error: year must be between 1 and 9999, got 10000"),
    ({"year": 2024, "locale": "xx-YY"}, "Error: unknown locale 'xx-YY'"),
    ({"year": 2024, "theme": "baroque"}, "Error: unknown theme 'baroque'"),
    ({"year": 2024, "special_days": "[{]"}, "Error: invalid special days"),
])
def test_bad_input_is_plain_text_400(client, params, message):
    resp = client.get("/calendar", params=params)
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text.startswith(message)


def test_public_holidays_merged_before_user_days(client, fake_source):
    special = [{"date": "2024-12-25", "name": "Dinner", "is_holiday": False}]
    resp = client.get("/calendar", params={
        "year": 2024, "locale": "sv-SE", "public_holidays": "true",
        "special_days": json.dumps(special),
    })
    assert resp.status_code == 200
    assert fake_source.calls == [(2024, "SE")]
    assert "Christmas Day, Dinner" in resp.text


def test_public_holidays_not_fetched_unless_asked(client, fake_source):
    client.get("/calendar", params={"year": 2024})
    assert fake_source.calls == []


def test_holiday_api_failure_is_502(client, monkeypatch):
    monkeypatch.setitem(holidays.SOURCES, "nager", FakeSource(fail=True))
    resp = client.get("/calendar", params={"year": 2024, "public_holidays": "true"})
    assert resp.status_code == 502
    assert resp.text == "Error: failed to fetch holidays: boom"


@pytest.mark.parametrize("params, message", [
    ({"year": 0}, "Error: year must be between 1 and 9999, got 0"),
    ({"year": 2024, "locale": "xx-YY"}, "Error: unknown locale 'xx-YY'"),
])
def test_invalid_year_or_locale_rejected_before_fetching(client, fake_source, params, message):
    resp = client.get("/calendar", params={**params, "public_holidays": "true"})
    assert resp.status_code == 400
    assert resp.text.startswith(message)
    assert fake_source.calls == []


@pytest.mark.parametrize("params, field", [
    ({"year": "abc"}, "year"),
    ({"year": 2024, "day_name_characters": -1}, "day_name_characters"),
    ({"year": 2024, "day_font_size": 0}, "day_font_size"),
])
def test_malformed_query_is_plain_text_400(client, params, field):
    resp = client.get("/calendar", params=params)
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text.startswith("Error: invalid parameters:")
    assert field in resp.text


def test_shell_page_served_from_memory(client, monkeypatch):
    from ycal.routers import pages

    monkeypatch.setattr(pages, "SHELL_HTML", "<p>cached form</p>")
    assert client.get("/").text == "<p>cached form</p>"
