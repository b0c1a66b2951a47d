"""Geographic positions: multi-format coordinate parsing and canonical rendering."""

import re
from dataclasses import dataclass
from enum import StrEnum

from babel import Locale
from babel.numbers import format_decimal

from mb_navformat.locale_service import resolve_locale

_NUM = r"(\d+(?:[.,]\d+)?)"
# Degrees, optional minutes, optional seconds, each with an optional unit mark
_COMPONENT = rf"{_NUM}\s*°?\s*(?:{_NUM}\s*['′]?\s*)?(?:{_NUM}\s*(?:\"|″|'')?\s*)?"
_SEP = r"[\s,;/]*"

# N48 07.2 E11 34.4, N 48° 7' 12" E 11° 34' 24"
_PREFIX_RE = re.compile(rf"([NS])\s*{_COMPONENT}{_SEP}([EW])\s*{_COMPONENT}")
# 48° 7.2' N 11° 34.4' E, 48 07 12N 011 34 24E
_SUFFIX_RE = re.compile(rf"{_COMPONENT}([NS]){_SEP}{_COMPONENT}([EW])")
# 4807N01134E, 480712N0113424E
_COMPACT_RE = re.compile(r"(\d{2})(\d{2})(\d{2})?([NS])(\d{3})(\d{2})(\d{2})?([EW])")
# 48.12, 11.5733 (latitude first)
_DECIMAL_RE = re.compile(r"([+-]?\d+(?:\.\d+)?)\s*[,;\s]\s*([+-]?\d+(?:\.\d+)?)")


class CoordinateStyle(StrEnum):
    """Canonical coordinate rendering style."""

    DEG_MIN = "deg_min"
    DEG_MIN_SEC = "deg_min_sec"
    DECIMAL = "decimal"


@dataclass(frozen=True, slots=True)
class Pos:
    """Geographic position in decimal degrees."""

    lon: float
    lat: float

    @property
    def is_valid(self) -> bool:
        """Longitude within +/-180 and latitude within +/-90."""
        return -180.0 <= self.lon <= 180.0 and -90.0 <= self.lat <= 90.0


def _to_float(raw: str) -> float:
    return float(raw.replace(",", "."))


def _degrees(deg_raw: str, min_raw: str | None, sec_raw: str | None) -> float | None:
    """Combine degrees, minutes and seconds. Only the last present component may have a fraction."""
    deg = _to_float(deg_raw)
    if min_raw is None:
        return None if sec_raw is not None else deg
    if not deg.is_integer():
        return None
    minutes = _to_float(min_raw)
    seconds = 0.0
    if sec_raw is not None:
        if not minutes.is_integer():
            return None
        seconds = _to_float(sec_raw)
    if minutes >= 60 or seconds >= 60:
        return None
    return deg + minutes / 60.0 + seconds / 3600.0


def _signed(value: float, hemisphere: str) -> float:
    return -value if hemisphere in "SW" else value


def _valid(pos: Pos) -> Pos | None:
    return pos if pos.is_valid else None


def parse_coordinates(text: str) -> Pos | None:
    """Parse a coordinate pair in any supported format. Returns None on invalid input.

    Supported formats:
      - hemisphere prefix: 'N48 07.2 E11 34.4', "N 48° 7' 12\" E 11° 34' 24\""
      - hemisphere suffix: "48° 7.2' N 11° 34.4' E", '48.12N 11.5733E'
      - compact: '4807N01134E', '480712N0113424E'
      - signed decimal degrees, latitude first: '48.12, 11.5733', '-33.9 18.6'
    """
    s = " ".join(text.strip().upper().split())
    if not s:
        return None

    # Compact first: suffix notation would read '4807N' as 4807 degrees
    m = _COMPACT_RE.fullmatch(s.replace(" ", ""))
    if m is not None:
        lat = _degrees(m.group(1), m.group(2), m.group(3))
        lon = _degrees(m.group(5), m.group(6), m.group(7))
        if lat is None or lon is None:
            return None
        return _valid(Pos(lon=_signed(lon, m.group(8)), lat=_signed(lat, m.group(4))))

    for regex, lat_hemi_group, lon_hemi_group, lat_groups, lon_groups in (
        (_PREFIX_RE, 1, 5, (2, 3, 4), (6, 7, 8)),
        (_SUFFIX_RE, 4, 8, (1, 2, 3), (5, 6, 7)),
    ):
        m = regex.fullmatch(s)
        if m is None:
            continue
        lat = _degrees(*(m.group(i) for i in lat_groups))
        lon = _degrees(*(m.group(i) for i in lon_groups))
        if lat is None or lon is None:
            return None
        return _valid(Pos(lon=_signed(lon, m.group(lon_hemi_group)), lat=_signed(lat, m.group(lat_hemi_group))))

    m = _DECIMAL_RE.fullmatch(s)
    if m is not None:
        return _valid(Pos(lon=float(m.group(2)), lat=float(m.group(1))))
    return None


def _deg_min(value: float, hemispheres: str, loc: Locale) -> str:
    tenths = round(abs(value) * 600)  # tenths of a minute
    deg, min_tenths = divmod(tenths, 600)
    minutes = format_decimal(min_tenths / 10, format="0.0", locale=loc)
    return f"{hemispheres[value < 0]} {deg}° {minutes}'"


def _deg_min_sec(value: float, hemispheres: str, loc: Locale) -> str:
    tenths = round(abs(value) * 36000)  # tenths of a second
    deg, rest = divmod(tenths, 36000)
    minutes, sec_tenths = divmod(rest, 600)
    seconds = format_decimal(sec_tenths / 10, format="0.0", locale=loc)
    return f"{hemispheres[value < 0]} {deg}° {minutes}' {seconds}\""


def format_coords(pos: Pos, style: CoordinateStyle = CoordinateStyle.DEG_MIN, locale: str | Locale | None = None) -> str:
    """Render pos in the canonical form for style, e.g. "N 48° 7.2' E 11° 34.4'"."""
    loc = resolve_locale(locale)
    if style == CoordinateStyle.DECIMAL:
        lat = format_decimal(pos.lat, format="0.00000", locale=loc)
        lon = format_decimal(pos.lon, format="0.00000", locale=loc)
        return f"{lat} {lon}"
    render = _deg_min if style == CoordinateStyle.DEG_MIN else _deg_min_sec
    return f"{render(pos.lat, 'NS', loc)} {render(pos.lon, 'EW', loc)}"
