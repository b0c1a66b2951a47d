"""Date-time parse recovery: read timestamps written in any of several locale date-time styles."""

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass

from babel import Locale

from mb_navformat.locale_service import FormatWidth, date_time_pattern, english_locale, parse_locale, system_locale
from mb_navformat.patterns import PatternError, PatternMatcher, ends_with_zone, year_variant
from mb_navformat.time_utils import ElapsedTimer, format_elapsed

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DateTimeCatalogue:
    """Patterns tried by read_date_time() in order, read with the names of the system locale."""

    locale: Locale
    matchers: tuple[PatternMatcher, ...]

    @property
    def patterns(self) -> tuple[str, ...]:
        """Pattern strings in try-order."""
        return tuple(matcher.pattern for matcher in self.matchers)


_catalogue: DateTimeCatalogue | None = None
_catalogue_lock = threading.Lock()


def build_date_time_formats(locales: Iterable[Locale]) -> list[str]:
    """Build the ordered pattern list for locales.

    Per locale: short, long and narrow patterns, then their year variants.
    Then every pattern not ending in a zone field gets a ' z' and a 'z' variant appended.
    """
    formats: list[str] = []
    for locale in locales:
        patterns = [date_time_pattern(locale, width) for width in FormatWidth]
        formats.extend(patterns)
        formats.extend(year_variant(pattern) for pattern in patterns)

    for pattern in list(formats):
        if not ends_with_zone(pattern):
            formats.append(pattern + " z")
            formats.append(pattern + "z")
    return formats


def init_date_time_formats(locale: str | Locale | None = None) -> DateTimeCatalogue:
    """Build and publish the date-time pattern catalogue. Call once at startup.

    Calling it again builds a new catalogue and replaces the published one in a single assignment.
    A read_date_time() call already running keeps the catalogue it started with.

    Args:
        locale: System locale to snapshot. Defaults to the locale of the process environment,
            independent of the display locale.

    """
    global _catalogue  # noqa: PLW0603
    timer = ElapsedTimer()
    system = system_locale() if locale is None else parse_locale(locale)

    matchers: list[PatternMatcher] = []
    for pattern in build_date_time_formats([system, english_locale()]):
        try:
            matchers.append(PatternMatcher(pattern, system))
        except PatternError:
            logger.warning("Skipping unreadable date-time pattern %r for locale %s", pattern, system)

    catalogue = DateTimeCatalogue(locale=system, matchers=tuple(matchers))
    with _catalogue_lock:
        _catalogue = catalogue

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Built %d date-time formats for %s in %s: %s",
            len(matchers),
            system,
            format_elapsed(timer.elapsed()),
            list(catalogue.patterns),
        )
    return catalogue


def current_catalogue() -> DateTimeCatalogue | None:
    """Return the published catalogue, or None before init_date_time_formats()."""
    return _catalogue


def date_time_formats() -> tuple[str, ...]:
    """Return the catalogue patterns in try-order, empty before init_date_time_formats()."""
    catalogue = _catalogue
    return () if catalogue is None else catalogue.patterns


def read_date_time(text: str) -> int | None:
    """Read a timestamp written in a system or English locale style.

    Whitespace runs are collapsed and the ends trimmed, then the catalogue patterns are tried in order.
    Returns POSIX seconds from the first pattern that gives a valid instant, or None.
    """
    catalogue = _catalogue
    if catalogue is None:
        logger.warning("read_date_time called before init_date_time_formats")
        return None

    normalized = " ".join(text.split())
    if not normalized:
        return None

    for matcher in catalogue.matchers:
        instant = matcher.parse(normalized)
        if instant is not None:
            logger.debug("Read %r as %d with pattern %r", normalized, instant, matcher.pattern)
            return instant
    return None
