"""Locale lookup, CLDR date-time patterns, and number rendering backed by Babel."""

import logging
from datetime import datetime
from enum import StrEnum

from babel import Locale, UnknownLocaleError, default_locale
from babel.dates import format_datetime
from babel.numbers import format_decimal

logger = logging.getLogger(__name__)

ENGLISH_LOCALE = "en_US"


class FormatWidth(StrEnum):
    """Date-time pattern width, in catalogue order."""

    SHORT = "short"
    LONG = "long"
    NARROW = "narrow"

    @property
    def cldr_width(self) -> str:
        """CLDR width backing this width. CLDR has no narrow date-time width, medium is the closest."""
        if self is FormatWidth.NARROW:
            return "medium"
        return self.value


_display_locale: Locale | None = None


def parse_locale(identifier: str | Locale) -> Locale:
    """Return a Babel Locale for an identifier like 'de_DE' or 'en-US'.

    Raises ValueError for unknown or malformed identifiers.
    """
    if isinstance(identifier, Locale):
        return identifier
    try:
        return Locale.parse(identifier, sep="-" if "-" in identifier else "_")
    except (UnknownLocaleError, TypeError, ValueError) as e:
        raise ValueError(f"Unknown locale: {identifier!r}") from e


def system_locale() -> Locale:
    """Return the locale configured in the process environment (LC_ALL, LC_TIME, LANG).

    Not affected by set_display_locale(). Falls back to en_US when the environment names nothing usable.
    """
    identifier = default_locale("LC_TIME")
    if identifier is None:
        return Locale.parse(ENGLISH_LOCALE)
    try:
        return parse_locale(identifier)
    except ValueError:
        logger.warning("Unusable system locale %r, falling back to %s", identifier, ENGLISH_LOCALE)
        return Locale.parse(ENGLISH_LOCALE)


def english_locale() -> Locale:
    """Return the fixed English fallback locale."""
    return Locale.parse(ENGLISH_LOCALE)


def set_display_locale(identifier: str | Locale | None) -> None:
    """Select the locale used for rendering. None returns to the system locale."""
    global _display_locale  # noqa: PLW0603
    _display_locale = None if identifier is None else parse_locale(identifier)


def get_display_locale() -> Locale:
    """Return the locale used for rendering."""
    if _display_locale is not None:
        return _display_locale
    return system_locale()


def resolve_locale(locale: str | Locale | None) -> Locale:
    """Return locale as a Babel Locale, the display locale when None."""
    if locale is None:
        return get_display_locale()
    return parse_locale(locale)


def date_time_pattern(locale: Locale, width: FormatWidth) -> str:
    """Return the combined date-time pattern of locale at width, e.g. 'M/d/yy, h:mm a'."""
    cldr_width = width.cldr_width
    date_pattern = locale.date_formats[cldr_width].pattern
    time_pattern = locale.time_formats[cldr_width].pattern
    return str(locale.datetime_formats[cldr_width]).replace("{1}", date_pattern).replace("{0}", time_pattern)


def format_pattern(value: datetime, pattern: str, locale: Locale) -> str:
    """Render an aware datetime with a CLDR pattern."""
    return format_datetime(value, pattern, locale=locale)


def format_integer(value: int, locale: Locale) -> str:
    """Render an integer with locale grouping."""
    return format_decimal(value, format="#,##0", locale=locale)


def format_number(value: float, precision: int, locale: Locale) -> str:
    """Render value as fixed-point with exactly precision fractional digits and locale grouping."""
    pattern = "#,##0." + "0" * precision if precision > 0 else "#,##0"
    return format_decimal(value, format=pattern, locale=locale)
