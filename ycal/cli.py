"""
Command-line shells
===================
  ycal YEAR [options]          — write the calendar HTML to stdout or --output
  ycal-holidays YEAR COUNTRY   — print public holidays as special-days JSON
  ycal-server [--port 3000]    — run the HTTP server

Every failure prints "Error: ..." to stderr and exits with status 1.
"""

import argparse
import asyncio
import logging
import sys

from ycal.core import CalendarError, generate_calendar, load_template, validate_request
from ycal.holidays import HolidayError, country_from_locale, get_source, merge_special_days
from ycal.models.schemas import CalendarRequest
from ycal.services.data_loader import (
    DEFAULT_THEME, DataFileError, UnknownTheme,
    dump_special_days, load_special_days, load_theme,
)
from ycal.settings import DEFAULT_LOCALE, HOST, PORT, configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ycal", description="Generate a printable yearly calendar as HTML",
    )
    parser.add_argument("year", type=int, help="Year to generate calendar for (1-9999)")
    parser.add_argument("--locale", default=DEFAULT_LOCALE,
                        help="Locale code (e.g. en-GB, sv-SE, de-DE)")
    parser.add_argument("--day-name-characters", type=int, default=1,
                        help="Number of characters to use for day names")
    parser.add_argument("--special-days", metavar="PATH",
                        help="Path to JSON special days file")
    parser.add_argument("--theme", default=DEFAULT_THEME,
                        help="Bundled theme name (minimalist, retro, contemporary) or path to a CSS file")
    parser.add_argument("--public-holidays", action="store_true",
                        help="Fetch public holidays for the locale's country from Nager.Date")
    parser.add_argument("--day-font-size", type=float, default=10.0, help="Day font size in pt")
    parser.add_argument("--month-font-size", type=float, default=10.0,
                        help="Month name font size in pt")
    parser.add_argument("--week-number-font-size", type=float, default=6.0,
                        help="Week number font size in pt")
    parser.add_argument("--special-day-font-size", type=float, default=6.0,
                        help="Special day name font size in pt")
    parser.add_argument("--notes-space", type=float, default=40.0,
                        help="Space for notes below month names in mm")
    parser.add_argument("--no-highlight-holidays", dest="highlight_holidays",
                        action="store_false",
                        help="Do not shade weekends and holidays")
    parser.add_argument("--sunday-only-weekend", dest="saturday_is_weekend",
                        action="store_false",
                        help="Treat only Sundays as weekend days")
    parser.add_argument("-o", "--output", metavar="PATH",
                        help="Write the HTML here instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser


def _fail(message) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def _fetch_public_holidays(year: int, locale: str):
    country_code = country_from_locale(locale)
    if country_code is None:
        logger.warning(f"Locale '{locale}' has no country code; skipping public holidays.")
        return []
    return asyncio.run(get_source().fetch_holidays(year, country_code))


def run(args: argparse.Namespace) -> int:
    try:
        load_template()
        validate_request(args.year, args.locale)
        theme_css = load_theme(args.theme)
        user_days = load_special_days(args.special_days) if args.special_days else []
        fetched = _fetch_public_holidays(args.year, args.locale) if args.public_holidays else []

        request = CalendarRequest(
            year=args.year,
            locale=args.locale,
            day_name_characters=max(args.day_name_characters, 0),
            theme_css=theme_css,
            special_days=merge_special_days(fetched, user_days),
            day_font_size_pt=args.day_font_size,
            month_font_size_pt=args.month_font_size,
            week_number_font_size_pt=args.week_number_font_size,
            special_day_font_size_pt=args.special_day_font_size,
            notes_space_mm=args.notes_space,
            highlight_holidays=args.highlight_holidays,
            saturday_is_weekend=args.saturday_is_weekend,
        )
        html = generate_calendar(request)
    except (CalendarError, HolidayError, DataFileError, UnknownTheme) as e:
        return _fail(e)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(html)
        except OSError as e:
            return _fail(f"unable to write file '{args.output}': {e}")
        logger.info(f"Calendar for {args.year} written to {args.output}.")
    else:
        sys.stdout.write(html)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.INFO if args.verbose else logging.WARNING)
    return run(args)


# ──────────────────────────────────────────────
# ycal-holidays
# ──────────────────────────────────────────────

def holidays_main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="ycal-holidays",
        description="Fetch public holidays from Nager.Date and output as special days JSON",
    )
    parser.add_argument("year", type=int, help="Year to fetch holidays for")
    parser.add_argument("country_code", help="Country code (e.g. GB, SE, DE)")
    args = parser.parse_args(argv)
    configure_logging(logging.WARNING)

    try:
        special_days = asyncio.run(get_source().fetch_holidays(args.year, args.country_code))
    except HolidayError as e:
        return _fail(e)

    print(dump_special_days(special_days))
    return 0


# ──────────────────────────────────────────────
# ycal-server
# ──────────────────────────────────────────────

def serve_main(argv=None) -> int:
    import uvicorn

    parser = argparse.ArgumentParser(prog="ycal-server", description="ycal web server")
    parser.add_argument("--host", default=HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=PORT, help="Port to listen on")
    args = parser.parse_args(argv)

    configure_logging()
    logger.info(f"Listening on http://localhost:{args.port}")
    uvicorn.run("ycal.main:app", host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
