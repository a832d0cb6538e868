from datetime import date

import pytest

from ycal.core.errors import InvalidLocale
from ycal.core.locales import (
    localize_month, localize_weekday, normalize_locale, resolve_locale, supported_locales,
)


def test_region_subtag_form_is_normalized():
    assert normalize_locale("sv-SE") == "sv_SE"
    assert resolve_locale("sv-SE").code == "sv_SE"
    assert resolve_locale("sv_SE").code == "sv_SE"


@pytest.mark.parametrize("code", ["xx-YY", "en", "", "en-XX", "english"])
def test_unknown_locale_is_rejected_with_the_given_code(code):
    with pytest.raises(InvalidLocale) as exc_info:
        resolve_locale(code)
    assert exc_info.value.locale == code
    assert f"'{code}'" in str(exc_info.value)


def test_names_in_natural_casing():
    sv = resolve_locale("sv-SE")
    assert localize_weekday(date(2024, 1, 1), sv) == "måndag"
    assert localize_month(8, resolve_locale("fr-FR")) == "août"


def test_austrian_january():
    assert localize_month(1, resolve_locale("de-AT")) == "Jänner"
    assert localize_month(1, resolve_locale("de-DE")) == "Januar"


def test_supported_locales_listed_in_region_form():
    codes = supported_locales()
    assert "en-GB" in codes
    assert "sv-SE" in codes
    assert all("-" in c for c in codes)
