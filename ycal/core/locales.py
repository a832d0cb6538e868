"""
Locale names
============
Weekday and month names per supported locale, kept as an explicit table so
output never depends on the host's locale database.

Codes are accepted in region-subtag form ("en-GB") and normalized to the
POSIX form ("en_GB") before lookup. Names are stored in the locale's natural
casing; capitalization is the presenter's job.
"""

from datetime import date
from typing import Dict, NamedTuple, Tuple

from ycal.core.errors import InvalidLocale


class LocaleNames(NamedTuple):
    code: str                    # normalized, e.g. "sv_SE"
    weekdays: Tuple[str, ...]    # Monday first
    months: Tuple[str, ...]      # January first


# ── Names per language ────────────────────────

_LANGUAGES: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "en": (
        ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
        ("January", "February", "March", "April", "May", "June", "July",
         "August", "September", "October", "November", "December"),
    ),
    "sv": (
        ("måndag", "tisdag", "onsdag", "torsdag", "fredag", "lördag", "söndag"),
        ("januari", "februari", "mars", "april", "maj", "juni", "juli",
         "augusti", "september", "oktober", "november", "december"),
    ),
    "de": (
        ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"),
        ("Januar", "Februar", "März", "April", "Mai", "Juni", "Juli",
         "August", "September", "Oktober", "November", "Dezember"),
    ),
    "fr": (
        ("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"),
        ("janvier", "février", "mars", "avril", "mai", "juin", "juillet",
         "août", "septembre", "octobre", "novembre", "décembre"),
    ),
    "es": (
        ("lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"),
        ("enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
         "agosto", "septiembre", "octubre", "noviembre", "diciembre"),
    ),
    "it": (
        ("lunedì", "martedì", "mercoledì", "giovedì", "venerdì", "sabato", "domenica"),
        ("gennaio", "febbraio", "marzo", "aprile", "maggio", "giugno", "luglio",
         "agosto", "settembre", "ottobre", "novembre", "dicembre"),
    ),
    "nl": (
        ("maandag", "dinsdag", "woensdag", "donderdag", "vrijdag", "zaterdag", "zondag"),
        ("januari", "februari", "maart", "april", "mei", "juni", "juli",
         "augustus", "september", "oktober", "november", "december"),
    ),
    "da": (
        ("mandag", "tirsdag", "onsdag", "torsdag", "fredag", "lørdag", "søndag"),
        ("januar", "februar", "marts", "april", "maj", "juni", "juli",
         "august", "september", "oktober", "november", "december"),
    ),
    "nb": (
        ("mandag", "tirsdag", "onsdag", "torsdag", "fredag", "lørdag", "søndag"),
        ("januar", "februar", "mars", "april", "mai", "juni", "juli",
         "august", "september", "oktober", "november", "desember"),
    ),
    "fi": (
        ("maanantai", "tiistai", "keskiviikko", "torstai", "perjantai", "lauantai", "sunnuntai"),
        ("tammikuu", "helmikuu", "maaliskuu", "huhtikuu", "toukokuu", "kesäkuu",
         "heinäkuu", "elokuu", "syyskuu", "lokakuu", "marraskuu", "joulukuu"),
    ),
    "pl": (
        ("poniedziałek", "wtorek", "środa", "czwartek", "piątek", "sobota", "niedziela"),
        ("styczeń", "luty", "marzec", "kwiecień", "maj", "czerwiec", "lipiec",
         "sierpień", "wrzesień", "październik", "listopad", "grudzień"),
    ),
    "pt": (
        ("segunda-feira", "terça-feira", "quarta-feira", "quinta-feira",
         "sexta-feira", "sábado", "domingo"),
        ("janeiro", "fevereiro", "março", "abril", "maio", "junho", "julho",
         "agosto", "setembro", "outubro", "novembro", "dezembro"),
    ),
    "cs": (
        ("pondělí", "úterý", "středa", "čtvrtek", "pátek", "sobota", "neděle"),
        ("leden", "únor", "březen", "duben", "květen", "červen", "červenec",
         "srpen", "září", "říjen", "listopad", "prosinec"),
    ),
}

# ── Supported regions per language ────────────

_REGIONS: Dict[str, Tuple[str, ...]] = {
    "en": ("GB", "US", "AU", "CA", "IE", "NZ", "ZA", "IN"),
    "sv": ("SE", "FI"),
    "de": ("DE", "AT", "CH", "LU", "BE"),
    "fr": ("FR", "BE", "CA", "CH", "LU"),
    "es": ("ES", "MX", "AR", "CO", "CL", "US"),
    "it": ("IT", "CH"),
    "nl": ("NL", "BE"),
    "da": ("DK",),
    "nb": ("NO",),
    "fi": ("FI",),
    "pl": ("PL",),
    "pt": ("PT", "BR"),
    "cs": ("CZ",),
}

# Austrian German names January differently
_MONTH_OVERRIDES: Dict[str, Dict[int, str]] = {
    "de_AT": {1: "Jänner"},
}


def _build_table() -> Dict[str, LocaleNames]:
    table: Dict[str, LocaleNames] = {}
    for language, regions in _REGIONS.items():
        weekdays, months = _LANGUAGES[language]
        for region in regions:
            code = f"{language}_{region}"
            overrides = _MONTH_OVERRIDES.get(code, {})
            table[code] = LocaleNames(
                code=code,
                weekdays=weekdays,
                months=tuple(overrides.get(i + 1, name) for i, name in enumerate(months)),
            )
    return table


LOCALES: Dict[str, LocaleNames] = _build_table()


def normalize_locale(code: str) -> str:
    return code.strip().replace("-", "_")


def resolve_locale(code: str) -> LocaleNames:
    """Look up a locale code such as "en-GB". Unknown codes raise InvalidLocale."""
    names = LOCALES.get(normalize_locale(code))
    if names is None:
        raise InvalidLocale(code)
    return names


def supported_locales() -> list:
    return sorted(code.replace("_", "-") for code in LOCALES)


def localize_weekday(day: date, locale: LocaleNames) -> str:
    return locale.weekdays[day.weekday()]


def localize_month(month: int, locale: LocaleNames) -> str:
    return locale.months[month - 1]
