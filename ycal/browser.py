"""
Embedding entry point for JavaScript-hosted Python (e.g. Pyodide).

    generate_calendar('{"year": 2024, "theme": "retro"}') -> "<!DOCTYPE html>..."

One JSON string in, one HTML string out, no file or network access. The
page supplies special days itself. Only bundled themes are available.
"""

from typing import List

from pydantic import BaseModel, ValidationError

from ycal import core
from ycal.models.schemas import CalendarRequest, SpecialDay
from ycal.services.data_loader import DEFAULT_THEME, load_bundled_theme


class BrowserParams(BaseModel):
    year: int
    locale: str = "en-GB"
    day_name_characters: int = 1
    day_font_size: float = 7.0
    month_font_size: float = 7.0
    notes_space: float = 24.0
    theme: str = DEFAULT_THEME
    special_days: List[SpecialDay] = []


def generate_calendar(params_json: str) -> str:
    try:
        params = BrowserParams.model_validate_json(params_json)
    except ValidationError as e:
        raise ValueError(str(e)) from e

    request = CalendarRequest(
        year=params.year,
        locale=params.locale,
        day_name_characters=max(params.day_name_characters, 0),
        theme_css=load_bundled_theme(params.theme),
        special_days=params.special_days,
        day_font_size_pt=params.day_font_size,
        month_font_size_pt=params.month_font_size,
        notes_space_mm=params.notes_space,
    )
    return core.generate_calendar(request)
