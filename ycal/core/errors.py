class CalendarError(Exception):
    """Base class for everything the rendering core can refuse."""


class InvalidYear(CalendarError):
    def __init__(self, year: int):
        self.year = year
        super().__init__(f"year must be between 1 and 9999, got {year}")


class InvalidLocale(CalendarError):
    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(
            f"unknown locale '{locale}'. Use a locale code like en-GB, sv-SE, de-DE."
        )


class TemplateError(CalendarError):
    """The bundled template is missing or does not compile. Indicates a packaging defect."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"invalid template: {detail}")
