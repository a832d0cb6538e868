from datetime import date

import pytest

from ycal.core.locales import resolve_locale
from ycal.models.schemas import CalendarRequest, SpecialDay


@pytest.fixture
def en_gb():
    return resolve_locale("en-GB")


@pytest.fixture
def christmas_days():
    return [
        SpecialDay(date=date(2024, 12, 25), name="Christmas", is_holiday=True),
        SpecialDay(date=date(2024, 12, 25), name="Office Closure", is_holiday=False),
    ]


@pytest.fixture
def make_request():
    def _make(**overrides):
        params = {"year": 2024, "locale": "en-GB", "day_name_characters": 1}
        params.update(overrides)
        return CalendarRequest(**params)
    return _make
