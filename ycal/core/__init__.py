"""
Calendar core: pure, synchronous, no I/O.

    generate_calendar(CalendarRequest) -> str

Pipeline: grid → special-day index → day presenter → model assembler → renderer.
Raises InvalidYear, InvalidLocale or TemplateError (all CalendarError); never
logs, never exits.
"""

from ycal.core.assembler import assemble_model
from ycal.core.errors import CalendarError, InvalidLocale, InvalidYear, TemplateError
from ycal.core.grid import build_months
from ycal.core.locales import LocaleNames, resolve_locale
from ycal.core.renderer import load_template, render
from ycal.core.special_days import build_index
from ycal.models.schemas import CalendarModel, CalendarRequest

MIN_YEAR = 1
MAX_YEAR = 9999


def validate_request(year: int, locale: str) -> LocaleNames:
    """
    Year range and locale lookup, in that order. Shells call this before
    any I/O that depends on the year or locale (e.g. fetching holidays).
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYear(year)
    return resolve_locale(locale)


def build_model(request: CalendarRequest) -> CalendarModel:
    """The presentation model for a request, without rendering it."""
    locale = validate_request(request.year, request.locale)

    months = build_months(request.year)
    index = build_index(request.special_days)
    return assemble_model(request, months, locale, index)


def generate_calendar(request: CalendarRequest) -> str:
    model = build_model(request)
    return render(model)


__all__ = [
    "CalendarError", "InvalidLocale", "InvalidYear", "TemplateError",
    "MAX_YEAR", "MIN_YEAR", "build_model", "generate_calendar", "load_template",
    "validate_request",
]
