from pydantic import BaseModel, ConfigDict, Field
from typing import List
from datetime import date


# ──────────────────────────────────────────────
# Input
# ──────────────────────────────────────────────

class SpecialDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    name: str
    is_holiday: bool


class CalendarRequest(BaseModel):
    """
    Everything one render needs, already materialized in memory.
    Built by the shells (CLI, HTTP, embedding) and never mutated.
    The year is range-checked by the core, not here.
    """
    model_config = ConfigDict(frozen=True)

    year: int
    locale: str = "en-GB"
    day_name_characters: int = Field(default=1, ge=0)
    theme_css: str = ""
    special_days: List[SpecialDay] = []

    day_font_size_pt: float = 10.0
    month_font_size_pt: float = 10.0
    week_number_font_size_pt: float = 6.0
    special_day_font_size_pt: float = 6.0
    notes_space_mm: float = 40.0            # blank space under month names
    highlight_holidays: bool = True
    saturday_is_weekend: bool = True        # False → only Sunday is weekend


# ──────────────────────────────────────────────
# Presentation — rebuilt per render
# ──────────────────────────────────────────────

class DayPresentation(BaseModel):
    day_number: int
    weekday: str                     # localized, truncated, capitalized
    week_number: int                 # ISO-8601
    is_week_start: bool
    is_weekend: bool
    is_month_start: bool
    is_last_day: bool                # Dec 31
    is_holiday: bool
    holiday_name: str = ""           # ", "-joined special-day names


class MonthPresentation(BaseModel):
    name: str
    days: List[DayPresentation]


class HalfPresentation(BaseModel):
    months: List[MonthPresentation]


class CalendarModel(BaseModel):
    year: int
    halves: List[HalfPresentation]
    theme_css: str
    day_font_size_pt: float
    month_font_size_pt: float
    week_number_font_size_pt: float
    special_day_font_size_pt: float
    notes_space_mm: float
    highlight_holidays: bool


# ──────────────────────────────────────────────
# Nager.Date wire format
# ──────────────────────────────────────────────

class NagerHoliday(BaseModel):
    date: date
    local_name: str = Field(alias="localName")
