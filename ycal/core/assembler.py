from datetime import date
from typing import List

from ycal.core.locales import LocaleNames
from ycal.core.presenter import month_label, present_day
from ycal.core.special_days import SpecialDayIndex
from ycal.models.schemas import (
    CalendarModel, CalendarRequest,
    HalfPresentation, MonthPresentation,
)

MONTHS_PER_HALF = 6


def assemble_model(
    request: CalendarRequest,
    months: List[List[date]],
    locale: LocaleNames,
    index: SpecialDayIndex,
) -> CalendarModel:
    """
    Present every day and split the year into two columns of six months
    (Jan–Jun, Jul–Dec) so the whole year fits one printed page.
    """
    presented: List[MonthPresentation] = []
    for days in months:
        presented.append(MonthPresentation(
            name=month_label(days[0].month, locale),
            days=[
                present_day(
                    day, index, locale,
                    request.day_name_characters,
                    request.saturday_is_weekend,
                )
                for day in days
            ],
        ))

    halves = [
        HalfPresentation(months=presented[:MONTHS_PER_HALF]),
        HalfPresentation(months=presented[MONTHS_PER_HALF:]),
    ]

    return CalendarModel(
        year=request.year,
        halves=halves,
        theme_css=request.theme_css,
        day_font_size_pt=request.day_font_size_pt,
        month_font_size_pt=request.month_font_size_pt,
        week_number_font_size_pt=request.week_number_font_size_pt,
        special_day_font_size_pt=request.special_day_font_size_pt,
        notes_space_mm=request.notes_space_mm,
        highlight_holidays=request.highlight_holidays,
    )
