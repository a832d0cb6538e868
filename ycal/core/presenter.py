from datetime import date

from ycal.core.locales import LocaleNames, localize_month, localize_weekday
from ycal.core.special_days import SpecialDayIndex, is_holiday, names_for
from ycal.models.schemas import DayPresentation

MONDAY, SATURDAY, SUNDAY = 0, 5, 6


def capitalize_first(text: str) -> str:
    """Upper-case the first character only; the rest is left as-is."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def weekday_label(day: date, locale: LocaleNames, day_name_characters: int) -> str:
    """
    Truncate the full localized weekday name, then capitalize.
    Truncation comes first so "måndag" with 2 characters gives "Må".
    """
    return capitalize_first(localize_weekday(day, locale)[:day_name_characters])


def month_label(month: int, locale: LocaleNames) -> str:
    return capitalize_first(localize_month(month, locale))


def present_day(
    day: date,
    index: SpecialDayIndex,
    locale: LocaleNames,
    day_name_characters: int,
    saturday_is_weekend: bool = True,
) -> DayPresentation:
    weekday = day.weekday()
    weekend_days = (SATURDAY, SUNDAY) if saturday_is_weekend else (SUNDAY,)

    return DayPresentation(
        day_number=day.day,
        weekday=weekday_label(day, locale, day_name_characters),
        week_number=day.isocalendar()[1],
        is_week_start=weekday == MONDAY,
        is_weekend=weekday in weekend_days,
        is_month_start=day.day == 1,
        is_last_day=day.month == 12 and day.day == 31,
        is_holiday=is_holiday(index, day),
        holiday_name=names_for(index, day),
    )
