import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from ycal.core import CalendarError, TemplateError, generate_calendar, validate_request
from ycal.holidays import HolidayError, country_from_locale, get_source, merge_special_days
from ycal.models.schemas import CalendarRequest
from ycal.services.data_loader import (
    DEFAULT_THEME, InvalidSpecialDays, UnknownTheme,
    load_bundled_theme, parse_special_days,
)
from ycal.settings import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/calendar", summary="Printable yearly calendar", response_class=HTMLResponse)
async def get_calendar(
    year: Optional[int] = Query(default=None, description="1-9999, defaults to the current year"),
    locale: str = Query(default=DEFAULT_LOCALE, description="Locale code like en-GB, sv-SE, de-DE"),
    theme: str = Query(default=DEFAULT_THEME, description="Bundled theme name"),
    day_name_characters: int = Query(default=1, ge=0, le=32),
    public_holidays: bool = Query(default=False, description="Fetch public holidays for the locale's country"),
    special_days: str = Query(default="", description="JSON array of {date, name, is_holiday}"),
    day_font_size: float = Query(default=10.0, gt=0),
    month_font_size: float = Query(default=10.0, gt=0),
    week_number_font_size: float = Query(default=6.0, gt=0),
    special_day_font_size: float = Query(default=6.0, gt=0),
    notes_space: float = Query(default=40.0, ge=0),
    highlight_holidays: bool = Query(default=True),
    saturday_is_weekend: bool = Query(default=True),
):
    """
    Render the whole year as one HTML page. Errors come back as plain text:
    400 for bad input, 502 when the public-holiday API fails.
    """
    if year is None:
        year = date.today().year

    try:
        validate_request(year, locale)
    except CalendarError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        theme_css = await run_in_threadpool(load_bundled_theme, theme)
    except UnknownTheme as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        user_days = parse_special_days(special_days)
    except InvalidSpecialDays as e:
        raise HTTPException(status_code=400, detail=f"invalid special days: {e}")

    fetched = []
    if public_holidays:
        country_code = country_from_locale(locale)
        if country_code is None:
            raise HTTPException(
                status_code=400,
                detail=f"locale '{locale}' has no country code to fetch public holidays for",
            )
        try:
            fetched = await get_source().fetch_holidays(year, country_code)
        except HolidayError as e:
            raise HTTPException(status_code=502, detail=str(e))

    request = CalendarRequest(
        year=year,
        locale=locale,
        day_name_characters=day_name_characters,
        theme_css=theme_css,
        special_days=merge_special_days(fetched, user_days),
        day_font_size_pt=day_font_size,
        month_font_size_pt=month_font_size,
        week_number_font_size_pt=week_number_font_size,
        special_day_font_size_pt=special_day_font_size,
        notes_space_mm=notes_space,
        highlight_holidays=highlight_holidays,
        saturday_is_weekend=saturday_is_weekend,
    )

    # Rendering is CPU-bound; keep it off the event loop
    try:
        html = await run_in_threadpool(generate_calendar, request)
    except TemplateError as e:
        logger.error(f"Calendar template broken: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except CalendarError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return HTMLResponse(content=html)
