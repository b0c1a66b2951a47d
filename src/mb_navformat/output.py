"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201

import json
import logging
import sys
from dataclasses import asdict, dataclass
from typing import NoReturn

import typer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DurationResult:
    """Fractional hours rendered in all duration styles."""

    hours: float
    short: str
    long: str
    days: str
    days_long: str


@dataclass(frozen=True, slots=True)
class NumberResult:
    """Number rendered with unit and precision."""

    value: float
    unit: str
    precision: int
    text: str


@dataclass(frozen=True, slots=True)
class DateResult:
    """POSIX timestamp rendered as short and long date."""

    time_t: int
    short: str
    long: str


@dataclass(frozen=True, slots=True)
class ParseDateResult:
    """Timestamp recovered from date-time text."""

    text: str
    time_t: int
    iso: str


@dataclass(frozen=True, slots=True)
class CoordinatesResult:
    """Result of a coordinate check."""

    text: str
    valid: bool
    message: str


@dataclass(frozen=True, slots=True)
class NavNameResult:
    """Capitalized navigation name."""

    text: str
    capitalized: str


@dataclass(frozen=True, slots=True)
class FormatsResult:
    """Date-time pattern catalogue in try-order."""

    locale: str
    patterns: list[str]


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def _success(self, data: dict[str, object], message: str) -> None:
        """Print a success result in JSON or human-readable format."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": data}, ensure_ascii=False))
        else:
            print(message)

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1."""
        logger.error("Command error: [%s] %s", code, message)
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}, ensure_ascii=False))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    def print_duration(self, result: DurationResult) -> None:
        """Print a duration in all styles."""
        self._success(
            asdict(result),
            f"Short:     {result.short}\nLong:      {result.long}\nDays:      {result.days}\nDays long: {result.days_long}",
        )

    def print_number(self, result: NumberResult) -> None:
        """Print a rendered number."""
        self._success(asdict(result), result.text)

    def print_date(self, result: DateResult) -> None:
        """Print short and long date renderings."""
        self._success(asdict(result), f"Short: {result.short}\nLong:  {result.long}")

    def print_parsed_date(self, result: ParseDateResult) -> None:
        """Print a recovered timestamp."""
        self._success(asdict(result), f"{result.time_t} ({result.iso})")

    def print_coordinates(self, result: CoordinatesResult) -> None:
        """Print the outcome of a valid coordinate check."""
        self._success(asdict(result), result.message)

    def print_nav_name(self, result: NavNameResult) -> None:
        """Print a capitalized navigation name."""
        self._success(asdict(result), result.capitalized)

    def print_formats(self, result: FormatsResult) -> None:
        """Print the date-time pattern catalogue as a numbered list or JSON."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": asdict(result)}, ensure_ascii=False))
            return

        if not result.patterns:
            print("No date-time formats.")
            return

        print(f"Date-time formats for {result.locale}:")
        for index, pattern in enumerate(result.patterns, start=1):
            print(f"{index:>3}  {pattern}")
