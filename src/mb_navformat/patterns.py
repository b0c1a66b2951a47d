"""CLDR date-time pattern tools: year variants, zone fields, and pattern-driven reading of text."""

import re
import zoneinfo
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache

from babel import Locale
from babel.core import get_global
from babel.dates import (
    NO_INHERITANCE_MARKER,
    get_day_names,
    get_era_names,
    get_month_names,
    get_period_id,
    get_period_names,
    get_timezone,
    tokenize_pattern,
)

ZONE_FIELDS = frozenset("zZOvVXx")

_NAME_WIDTHS = {3: "abbreviated", 4: "wide", 5: "narrow", 6: "short"}

# Offsets (GMT+1, UTC-05:00, +0100), tz database keys (Europe/Berlin) or names (Z, CET, Central European Time).
# The text is only a candidate: _zone_offset() accepts known prefixes and names only.
_ZONE_REGEX = (
    r"(?:[^\W\d_]+)?[+\-−]\d{1,2}(?::?\d{2})?"
    r"|[^\W\d]+(?:/[\w+\-]+)+"
    r"|[^\W\d_]+(?:[\s.'\-][^\W\d_]+)*\.?"
)
_ZONE_OFFSET_RE = re.compile(r"(.*?)([+\-−])(\d{1,2})(?::?(\d{2}))?")
_UTC_NAMES = frozenset({"gmt", "utc", "ut", "z"})

Token = tuple[str, str | tuple[str, int]]


class PatternError(ValueError):
    """Pattern contains a field that cannot be read back from text."""


@dataclass(frozen=True, slots=True)
class _ZoneName:
    zone: str
    variant: str  # generic, standard, daylight; empty for tz database keys


def _untokenize(tokens: list[Token]) -> str:
    """Join tokens back into a pattern, quoting literals that contain letters or quotes."""
    parts: list[str] = []
    for kind, value in tokens:
        if kind == "field":
            char, count = value
            parts.append(char * count)
        elif any(ch.isalpha() or ch == "'" for ch in value):
            parts.append("'" + value.replace("'", "''") + "'")
        else:
            parts.append(value)
    return "".join(parts)


def _is_zone(token: Token) -> bool:
    kind, value = token
    return kind == "field" and value[0] in ZONE_FIELDS


def year_variant(pattern: str) -> str:
    """Swap the year width of pattern.

    Four-digit and full years ('yyyy', 'y') become 'yy'. A pattern whose years are all 'yy' gets 'yyyy'.
    A pattern without a year field is returned unchanged.
    """
    tokens = tokenize_pattern(pattern)
    counts = [value[1] for kind, value in tokens if kind == "field" and value[0] == "y"]
    if not counts:
        return pattern
    target = 4 if all(count == 2 for count in counts) else 2
    swapped: list[Token] = [
        ("field", ("y", target)) if kind == "field" and value[0] == "y" else (kind, value) for kind, value in tokens
    ]
    return _untokenize(swapped)


def ends_with_zone(pattern: str) -> bool:
    """Return True if the last token of pattern is a time-zone field."""
    tokens = tokenize_pattern(pattern)
    return bool(tokens) and _is_zone(tokens[-1])


def strip_zone(pattern: str) -> str:
    """Remove time-zone fields and the whitespace in front of them."""
    tokens: list[Token] = []
    for token in tokenize_pattern(pattern):
        if not _is_zone(token):
            tokens.append(token)
            continue
        if tokens and tokens[-1][0] == "chars":
            kind, value = tokens.pop()
            if value.rstrip():
                tokens.append((kind, value.rstrip()))
    return _untokenize(tokens).strip()


def _literal_regex(text: str) -> str:
    """Whitespace runs match any whitespace run, commas are optional, everything else is exact."""
    parts: list[str] = []
    for chunk in re.split(r"(\s+)", text):
        if not chunk:
            continue
        if chunk.isspace():
            parts.append(r"\s+")
        else:
            parts.append("".join(",?" if ch == "," else re.escape(ch) for ch in chunk))
    return "".join(parts)


def _fold(text: str) -> str:
    """Key for name lookups: whitespace runs collapsed to one space, case folded."""
    return " ".join(text.split()).casefold()


def _names_regex(names: Iterable[str]) -> str:
    """Alternation of names, longest first. Whitespace inside a name (CLDR 'p. m.') matches any whitespace run."""
    unique = {" ".join(name.split()) for name in names}
    return "|".join(
        r"\s+".join(re.escape(part) for part in name.split(" ")) for name in sorted(unique, key=len, reverse=True)
    )


def _gmt_prefixes(locale: Locale) -> frozenset[str]:
    """Folded prefixes of numeric offsets: GMT, UTC, UT and the locale's own GMT format."""
    gmt_format = locale.zone_formats.get("gmt", "GMT%s")
    return _UTC_NAMES - {"z"} | {_fold(gmt_format.replace("%s", "").replace("{0}", ""))}


def _add_cldr_zone_names(names: dict[str, _ZoneName], zone: str, info: Mapping) -> None:
    for width in ("long", "short"):
        for variant, name in info.get(width, {}).items():
            if name and name.strip() and name != NO_INHERITANCE_MARKER:
                names[_fold(name)] = _ZoneName(zone, variant)


@lru_cache(maxsize=16)
def _zone_names(locale_id: str) -> dict[str, _ZoneName]:
    """Zone names readable for locale_id, by folded name.

    tz database keys first, then CLDR metazone and zone names of English and of the locale, later entries winning.
    A metazone is resolved through the first zone that uses it.
    """
    names = {_fold(key): _ZoneName(key, "") for key in sorted(zoneinfo.available_timezones())}
    metazone_zones: dict[str, str] = {}
    for zone, metazone in sorted(get_global("meta_zones").items()):
        metazone_zones.setdefault(metazone, zone)
    for locale in (Locale.parse("en"), Locale.parse(locale_id)):
        for metazone, info in locale.meta_zones.items():
            if metazone in metazone_zones:
                _add_cldr_zone_names(names, metazone_zones[metazone], info)
        for zone, info in locale.time_zones.items():
            _add_cldr_zone_names(names, zone, info)
    return names


def _zone_offset(text: str, wall: datetime, locale: Locale) -> timedelta | None:
    """Return the UTC offset spelled by text at local time wall, or None if text names no known zone."""
    folded = _fold(text)
    prefixes = _gmt_prefixes(locale)
    m = _ZONE_OFFSET_RE.fullmatch(folded)
    if m is not None and m.group(1).strip() in prefixes | {""}:
        sign = 1 if m.group(2) == "+" else -1
        return sign * timedelta(hours=int(m.group(3)), minutes=int(m.group(4) or 0))
    if folded in prefixes or folded == "z":
        return timedelta(0)

    name = _zone_names(str(locale)).get(folded)
    if name is None:
        return None
    try:
        tz = get_timezone(name.zone)
    except LookupError:
        return None
    offset = tz.utcoffset(wall)
    dst = tz.dst(wall) or timedelta(0)
    if name.variant == "standard":
        return offset - dst
    if name.variant == "daylight":
        return offset - dst + (dst or timedelta(hours=1))
    return offset


@dataclass(frozen=True, slots=True)
class _Field:
    group: str
    char: str
    count: int


class PatternMatcher:
    """Reads text laid out by one CLDR pattern, with the month, weekday, era, period and zone names of one locale."""

    def __init__(self, pattern: str, locale: Locale) -> None:
        """Compile pattern.

        Raises PatternError if the pattern has a field that cannot be read.
        """
        self.pattern = pattern
        self._locale = locale
        self._fields: list[_Field] = []
        self._names: dict[str, dict[str, int]] = {}
        self._day_periods: dict[str, dict[str, frozenset[str]]] = {}

        parts: list[str] = []
        for kind, value in tokenize_pattern(pattern):
            if kind == "chars":
                parts.append(_literal_regex(value))
                continue
            char, count = value
            field = _Field(group=f"f{len(self._fields)}", char=char, count=count)
            self._fields.append(field)
            parts.append(f"(?P<{field.group}>{self._field_regex(field)})")
        self._regex = re.compile("".join(parts), re.IGNORECASE)

    def __repr__(self) -> str:
        return f"PatternMatcher({self.pattern!r}, {str(self._locale)!r})"

    def _no_names(self, field: _Field) -> PatternError:
        return PatternError(f"No {field.char * field.count!r} names for locale {self._locale} in {self.pattern!r}")

    def _register_names(self, field: _Field, names: dict[str, int]) -> str:
        names = {name: value for name, value in names.items() if name and name.strip()}
        if not names:
            raise self._no_names(field)
        self._names[field.group] = {_fold(name): value for name, value in names.items()}
        return _names_regex(names)

    def _register_day_periods(self, field: _Field) -> str:
        """Flexible day periods (noon, in the afternoon, at night) by name, each name mapped to its period ids."""
        ids: dict[str, set[str]] = {}
        originals: list[str] = []
        for context in ("format", "stand-alone"):
            for width in ("abbreviated", "wide", "narrow"):
                try:
                    periods = get_period_names(width, context, self._locale)
                except KeyError:
                    continue
                for period_id, name in periods.items():
                    if name and name.strip():
                        ids.setdefault(_fold(name), set()).add(period_id)
                        originals.append(name)
        if not ids:
            raise self._no_names(field)
        self._day_periods[field.group] = {name: frozenset(period_ids) for name, period_ids in ids.items()}
        return _names_regex(originals)

    def _field_regex(self, field: _Field) -> str:
        char, count = field.char, field.count
        if char in "yu":
            if count == 2:
                return r"\d{2}"
            return r"\d{4}" if count >= 4 else r"\d{1,4}"
        if char in "ML":
            if count <= 2:
                return r"\d{1,2}" if count == 1 else r"\d{2}"
            width = _NAME_WIDTHS[min(count, 5)]
            names: dict[str, int] = {}
            for context in ("format", "stand-alone"):
                names.update({name: month for month, name in get_month_names(width, context, self._locale).items()})
            return self._register_names(field, names)
        if char in "dhHKkms":
            return r"\d{1,2}" if count == 1 else rf"\d{{{count}}}"
        if char == "S":
            return rf"\d{{{count}}}"
        if char in "ec" and count <= 2:
            return r"\d"
        if char in "Eec":
            width = _NAME_WIDTHS[max(3, min(count, 6))]
            names = {}
            for context in ("format", "stand-alone"):
                names.update({name: day for day, name in get_day_names(width, context, self._locale).items()})
            return self._register_names(field, names)
        if char == "a":
            names = {}
            for width in ("abbreviated", "wide", "narrow"):
                periods = get_period_names(width, "format", self._locale)
                names.update({periods[key]: offset for key, offset in (("am", 0), ("pm", 12)) if key in periods})
            return self._register_names(field, names)
        if char in "bB":
            return self._register_day_periods(field)
        if char == "G":
            width = _NAME_WIDTHS[max(3, min(count, 5))]
            return self._register_names(field, {name: era for era, name in get_era_names(width, self._locale).items()})
        if char in ZONE_FIELDS:
            return _ZONE_REGEX
        raise PatternError(f"Unsupported field {char * count!r} in {self.pattern!r}")

    def _name_value(self, field: _Field, text: str) -> int | None:
        return self._names[field.group].get(_fold(text))

    def _day_period_hour(self, hour: int, minute: int, period_ids: frozenset[str]) -> int | None:
        """Pick the hour of the day, hour or hour + 12, that falls in one of period_ids."""
        for candidate in (hour, hour + 12):
            moment = datetime(2000, 1, 1, candidate, minute, tzinfo=UTC)
            half = "am" if candidate < 12 else "pm"
            if half in period_ids or get_period_id(moment, tzinfo=UTC, locale=self._locale) in period_ids:
                return candidate
        return None

    def parse(self, text: str) -> int | None:
        """Read text as an instant in POSIX seconds, or None if text does not fit the pattern or is not a valid date."""
        match = self._regex.fullmatch(text)
        if match is None:
            return None

        year, month, day = 1900, 1, 1
        hour = minute = second = microsecond = 0
        twelve_hour = False
        period: int | None = 0
        period_ids: frozenset[str] | None = None
        weekday: int | None = None
        zone: str | None = None

        for field in self._fields:
            raw = match.group(field.group)
            char = field.char
            if char in "yu":
                year = int(raw)
                if field.count == 2:
                    # POSIX pivot: 69-99 in the 1900s, 00-68 in the 2000s
                    year += 1900 if year >= 69 else 2000
            elif char in "ML":
                value = int(raw) if field.count <= 2 else self._name_value(field, raw)
                if value is None:
                    return None
                month = value
            elif char == "d":
                day = int(raw)
            elif char == "h":
                value = int(raw)
                if not 1 <= value <= 12:
                    return None
                hour, twelve_hour = value % 12, True
            elif char == "K":
                hour, twelve_hour = int(raw), True
                if hour > 11:
                    return None
            elif char == "H":
                hour = int(raw)
            elif char == "k":
                value = int(raw)
                if not 1 <= value <= 24:
                    return None
                hour = value % 24
            elif char == "m":
                minute = int(raw)
            elif char == "s":
                second = int(raw)
            elif char == "S":
                microsecond = int(raw.ljust(6, "0")[:6])
            elif char == "a":
                period = self._name_value(field, raw)
            elif char in "bB":
                period_ids = self._day_periods[field.group].get(_fold(raw))
                if period_ids is None:
                    return None
            elif char == "G":
                if self._name_value(field, raw) in (0, None):
                    return None
            elif char in "Eec" and field.group in self._names:
                weekday = self._name_value(field, raw)
                if weekday is None:
                    return None
            elif char in ZONE_FIELDS:
                zone = raw

        if period is None:
            return None
        if twelve_hour and period_ids is not None:
            resolved = self._day_period_hour(hour, minute, period_ids)
            if resolved is None:
                return None
            hour = resolved
        elif twelve_hour:
            hour += period

        try:
            wall = datetime(year, month, day, hour, minute, second, microsecond)
        except ValueError:
            return None
        if weekday is not None and wall.weekday() != weekday:
            return None
        offset = timedelta(0)
        if zone is not None:
            offset = _zone_offset(zone, wall, self._locale)
            if offset is None:
                return None
        try:
            instant = int((wall - offset).replace(tzinfo=UTC).timestamp())
        except (ValueError, OverflowError):
            return None
        return instant if instant > 0 else None
