"""
Data Loader
===========
Helpers for loading the shells' inputs from disk.

  special days — JSON array of {date: "YYYY-MM-DD", name, is_holiday}
  themes       — raw CSS; either a bundled name (ycal/themes/{name}.css)
                 or a path to the user's own stylesheet
"""

import json
import os
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from ycal.models.schemas import SpecialDay

THEMES_DIR = Path(os.getenv("YCAL_THEMES_DIR", Path(__file__).resolve().parent.parent / "themes"))
DEFAULT_THEME = "minimalist"

_special_days_adapter = TypeAdapter(List[SpecialDay])


class DataFileError(Exception):
    def __init__(self, path, message: str):
        self.path = path
        super().__init__(message)


class UnknownTheme(Exception):
    def __init__(self, theme: str):
        self.theme = theme
        super().__init__(f"unknown theme '{theme}'")


class InvalidSpecialDays(ValueError):
    pass


def read_text(path) -> str:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise DataFileError(path, f"unable to read file '{path}': {e}") from e


def parse_special_days(text: str) -> List[SpecialDay]:
    """Parse a special-days JSON array. Blank text means no special days."""
    if not text.strip():
        return []
    try:
        return _special_days_adapter.validate_json(text)
    except ValidationError as e:
        raise InvalidSpecialDays(str(e)) from e


def load_special_days(path) -> List[SpecialDay]:
    content = read_text(path)
    try:
        return parse_special_days(content)
    except InvalidSpecialDays as e:
        raise DataFileError(
            path, f"unable to parse file content as JSON '{path}': {e}"
        ) from e


def list_themes() -> List[str]:
    return sorted(p.stem for p in THEMES_DIR.glob("*.css"))


def load_bundled_theme(name: str) -> str:
    if name not in list_themes():
        raise UnknownTheme(name)
    return read_text(THEMES_DIR / f"{name}.css")


def load_theme(name_or_path) -> str:
    """
    Bundled theme name first, then a stylesheet path.
    Anything that is neither raises UnknownTheme.
    """
    name = str(name_or_path)
    if name in list_themes():
        return load_bundled_theme(name)
    if Path(name).is_file():
        return read_text(name)
    raise UnknownTheme(name)


def dump_special_days(special_days: List[SpecialDay]) -> str:
    """Special days as the same JSON layout load_special_days reads."""
    return json.dumps(
        [d.model_dump(mode="json") for d in special_days],
        ensure_ascii=False,
        indent=2,
    )
