"""Duration formatting and elapsed-time utilities."""

import math
import time

from babel import Locale

from mb_navformat.i18n import _, ngettext
from mb_navformat.locale_service import format_integer, resolve_locale


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def split_hours_minutes(hours: float) -> tuple[int, int]:
    """Split fractional hours into whole hours and rounded minutes, carrying 60 minutes into the hour."""
    whole = math.floor(hours)
    minutes = _round_half_away((hours - whole) * 60)
    if minutes == 60:
        return whole + 1, 0
    return whole, minutes


def split_days_hours_minutes(hours: float) -> tuple[int, int, int]:
    """Split fractional hours into days, hours of day, and rounded minutes, applying the minute carry first."""
    total_hours, minutes = split_hours_minutes(hours)
    days = total_hours // 24
    return days, total_hours - days * 24, minutes


def format_minutes_hours(hours: float, locale: str | Locale | None = None) -> str:
    """Format fractional hours as H:MM, e.g. 1.5 -> '1:30'."""
    loc = resolve_locale(locale)
    whole, minutes = split_hours_minutes(hours)
    return _("{hours}:{minutes:02d}").format(hours=format_integer(whole, loc), minutes=minutes)


def format_minutes_hours_long(hours: float, locale: str | Locale | None = None) -> str:
    """Format fractional hours as 'H h MM m', e.g. 1.5 -> '1 h 30 m'."""
    loc = resolve_locale(locale)
    whole, minutes = split_hours_minutes(hours)
    return _("{hours} h {minutes:02d} m").format(hours=format_integer(whole, loc), minutes=minutes)


def format_minutes_hours_days(hours: float, locale: str | Locale | None = None) -> str:
    """Format fractional hours as D:HH:MM, e.g. 25.25 -> '1:01:15'."""
    loc = resolve_locale(locale)
    days, hours_of_day, minutes = split_days_hours_minutes(hours)
    return _("{days}:{hours:02d}:{minutes:02d}").format(days=format_integer(days, loc), hours=hours_of_day, minutes=minutes)


def format_minutes_hours_days_long(hours: float, locale: str | Locale | None = None) -> str:
    """Format fractional hours as 'D d HH h MM m', leaving out zero leading components.

    The first component is rendered with locale grouping, the following ones with two padded digits:
    25.25 -> '1 d 01 h 15 m', 1.25 -> '1 h 15 m', 0.25 -> '15 m'.
    """
    loc = resolve_locale(locale)
    days, hours_of_day, minutes = split_days_hours_minutes(hours)

    parts: list[str] = []
    if days > 0:
        parts.append(_("{days} d").format(days=format_integer(days, loc)))
    if hours_of_day > 0:
        if parts:
            parts.append(_("{hours:02d} h").format(hours=hours_of_day))
        else:
            parts.append(_("{hours} h").format(hours=format_integer(hours_of_day, loc)))
    if parts:
        parts.append(_("{minutes:02d} m").format(minutes=minutes))
    else:
        parts.append(_("{minutes} m").format(minutes=format_integer(minutes, loc)))
    return " ".join(parts)


def format_elapsed(elapsed_ms: int, locale: str | Locale | None = None) -> str:
    """Format a millisecond span as '5 seconds' or '2 minutes 5 seconds'."""
    loc = resolve_locale(locale)
    secs = elapsed_ms // 1000
    if secs < 60:
        return ngettext("{seconds} second", "{seconds} seconds", secs).format(seconds=format_integer(secs, loc))

    mins, secs = divmod(secs, 60)
    minutes_text = ngettext("{minutes} minute", "{minutes} minutes", mins).format(minutes=format_integer(mins, loc))
    seconds_text = ngettext("{seconds} second", "{seconds} seconds", secs).format(seconds=format_integer(secs, loc))
    return _("{minutes} {seconds}").format(minutes=minutes_text, seconds=seconds_text)


class ElapsedTimer:
    """Monotonic stopwatch started on creation."""

    def __init__(self) -> None:
        self._started_ns = time.monotonic_ns()

    def restart(self) -> int:
        """Restart the timer and return the milliseconds elapsed before the restart."""
        now = time.monotonic_ns()
        elapsed = (now - self._started_ns) // 1_000_000
        self._started_ns = now
        return elapsed

    def elapsed(self) -> int:
        """Return milliseconds since start."""
        return (time.monotonic_ns() - self._started_ns) // 1_000_000
