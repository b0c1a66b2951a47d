"""Localized rendering of quantities, dates and coordinates for display."""

import math
import struct
from dataclasses import dataclass
from datetime import UTC, datetime

from babel import Locale
from babel.dates import format_datetime

from mb_navformat import htmlbuilder, nav_strings
from mb_navformat.coords import CoordinateStyle, format_coords, parse_coordinates
from mb_navformat.i18n import _
from mb_navformat.locale_service import FormatWidth, date_time_pattern, format_number, format_pattern, resolve_locale
from mb_navformat.patterns import strip_zone


@dataclass(frozen=True, slots=True)
class CoordinateCheck:
    """Result of checking user-entered coordinates."""

    valid: bool
    message: str
    plain_message: str  # message without markup


def format_double_unit(value: float, unit: str = "", precision: int = 0, locale: str | Locale | None = None) -> str:
    """Format value with exactly precision fractional digits, locale grouping, and an optional unit.

    format_double_unit(1234.5, "ft", 1) -> '1,234.5 ft'
    """
    number = format_number(value, precision, resolve_locale(locale))
    if not unit:
        return number
    return _("{value} {unit}").format(value=number, unit=unit)


def format_float_unit(value: float, unit: str = "", precision: int = 0, locale: str | Locale | None = None) -> str:
    """Like format_double_unit() for a single precision measurement: value is narrowed to 32 bits first."""
    try:
        (single,) = struct.unpack("f", struct.pack("f", value))
    except OverflowError:
        # Beyond the 32-bit range
        single = math.copysign(math.inf, value)
    return format_double_unit(single, unit, precision, locale)


def _utc_datetime(time_t: int) -> datetime | None:
    if time_t <= 0:
        return None
    try:
        return datetime.fromtimestamp(time_t, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None


def format_date(time_t: int, locale: str | Locale | None = None) -> str:
    """Format POSIX seconds as a short UTC date and time, or 'Invalid date' for values <= 0."""
    dt = _utc_datetime(time_t)
    if dt is None:
        return _("Invalid date")
    return format_datetime(dt, "short", tzinfo=UTC, locale=resolve_locale(locale))


def format_date_long(time_t: int, locale: str | Locale | None = None) -> str:
    """Format POSIX seconds as a long date and time without zone label, or 'Invalid date' for values <= 0.

    The zone is left out since flight simulator files store local time without a zone.
    """
    dt = _utc_datetime(time_t)
    if dt is None:
        return _("Invalid date")
    loc = resolve_locale(locale)
    return format_pattern(dt, strip_zone(date_time_pattern(loc, FormatWidth.LONG)), loc)


def cap_nav_string(text: str) -> str:
    """Capitalize a navaid, airport or airspace name."""
    return nav_strings.cap_nav_string(text)


def check_coordinates(
    text: str, style: CoordinateStyle = CoordinateStyle.DEG_MIN, locale: str | Locale | None = None
) -> CoordinateCheck:
    """Check user-entered coordinates and build a message for display.

    A valid entry is echoed in canonical form when it differs from the input.
    An invalid entry gets an error-highlighted message.
    """
    pos = parse_coordinates(text)
    if pos is None:
        error = _("Coordinates are not valid.")
        return CoordinateCheck(valid=False, message=htmlbuilder.error_message(error), plain_message=error)

    coords = format_coords(pos, style, locale)
    if coords != text:
        message = _("Coordinates are valid: {coords}").format(coords=coords)
        return CoordinateCheck(valid=True, message=message, plain_message=message)
    message = _("Coordinates are valid.")
    return CoordinateCheck(valid=True, message=message, plain_message=message)
