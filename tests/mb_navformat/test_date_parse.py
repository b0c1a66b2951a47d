"""Tests for date_parse module."""

from datetime import UTC, datetime

import pytest
from babel import Locale
from babel.dates import format_datetime

from mb_navformat import date_parse
from mb_navformat.date_parse import (
    DateTimeCatalogue,
    build_date_time_formats,
    current_catalogue,
    date_time_formats,
    init_date_time_formats,
    read_date_time,
)
from mb_navformat.formatter import format_date
from mb_navformat.locale_service import FormatWidth, date_time_pattern
from mb_navformat.patterns import ends_with_zone, year_variant

EN = Locale.parse("en_US")
DE = Locale.parse("de_DE")

# 2020-01-15 15:04 UTC
INSTANT = 1579100640
MIDNIGHT = 1579046400


class TestBuildDateTimeFormats:
    """Tests for build_date_time_formats function."""

    def test_order(self):
        """Widths per locale, then year variants, then zone suffixes for every zoneless entry."""
        formats = build_date_time_formats([DE, EN])

        base: list[str] = []
        for locale in (DE, EN):
            widths = [date_time_pattern(locale, width) for width in FormatWidth]
            base.extend(widths)
            base.extend(year_variant(pattern) for pattern in widths)
        suffixed: list[str] = []
        for pattern in base:
            if not ends_with_zone(pattern):
                suffixed.extend([pattern + " z", pattern + "z"])

        assert formats == base + suffixed

    def test_system_locale_first(self):
        """The first entries come from the first locale, short width first."""
        formats = build_date_time_formats([DE, EN])
        assert formats[0] == date_time_pattern(DE, FormatWidth.SHORT)
        assert formats[1] == date_time_pattern(DE, FormatWidth.LONG)
        assert formats[6] == date_time_pattern(EN, FormatWidth.SHORT)

    def test_no_zone_suffix_on_zoned_patterns(self):
        """Patterns already ending in a zone field get no extra zone."""
        for pattern in build_date_time_formats([EN]):
            assert not pattern.endswith((" z z", " zz"))

    def test_empty(self):
        """No locales, no formats."""
        assert build_date_time_formats([]) == []


class TestInitDateTimeFormats:
    """Tests for init_date_time_formats function."""

    def test_publishes_catalogue(self, de_catalogue: DateTimeCatalogue):
        """The built catalogue becomes current and lists its patterns in try-order."""
        assert current_catalogue() is de_catalogue
        assert de_catalogue.locale == DE
        assert date_time_formats() == de_catalogue.patterns
        assert de_catalogue.patterns[0] == date_time_pattern(DE, FormatWidth.SHORT)

    def test_every_format_compiles(self, en_catalogue: DateTimeCatalogue):
        """All CLDR patterns of en_US are readable."""
        assert list(en_catalogue.patterns) == build_date_time_formats([EN, EN])

    def test_reinit_replaces(self, en_catalogue: DateTimeCatalogue):
        """A second initialization replaces the catalogue."""
        de = init_date_time_formats("de_DE")
        assert current_catalogue() is de
        assert current_catalogue() is not en_catalogue

    def test_unknown_locale(self):
        """Unknown locale identifiers raise ValueError."""
        with pytest.raises(ValueError, match="Unknown locale"):
            init_date_time_formats("xx_YY")

    def test_not_initialized(self, monkeypatch: pytest.MonkeyPatch):
        """Before initialization no formats are listed."""
        monkeypatch.setattr(date_parse, "_catalogue", None)
        assert current_catalogue() is None
        assert date_time_formats() == ()


class TestReadDateTime:
    """Tests for read_date_time function."""

    @pytest.mark.parametrize(
        "text",
        [
            "1/15/2020 3:04 PM",
            "1/15/2020, 3:04 PM",
            "  1/15/2020    3:04   PM  ",
            "1/15/20 3:04 PM",
            "1/15/20 3:04 PM UTC",
            "1/15/20 3:04 pm utc",
            "1/15/20 4:04 PM GMT+1",
            "1/15/20 4:04 PM CET",
            "Jan 15, 2020, 3:04:00 PM",
        ],
    )
    def test_english(self, en_catalogue: DateTimeCatalogue, text: str):
        """English short, medium and long styles with optional zone are read."""
        assert read_date_time(text) == INSTANT

    @pytest.mark.parametrize(
        "text",
        [
            "15.01.2020 15:04",
            "15.01.20, 15:04",
            "15.01.2020 15:04 UTC",
            "1/15/2020 3:04 PM",
        ],
    )
    def test_german_system_locale(self, de_catalogue: DateTimeCatalogue, text: str):
        """German styles are read first, English styles still apply."""
        assert read_date_time(text) == INSTANT

    def test_german_text_needs_german_system_locale(self, en_catalogue: DateTimeCatalogue):
        """Without a German system locale, German dates are not read."""
        assert read_date_time("15.01.2020 15:04") is None

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "garbage",
            "2/30/20 3:04 PM",
            "1/15/20 25:00",
            "1/1/70, 12:00 AM",
            "1/15/20 3:04 PM banana",
            "1/15/20 3:04 PM Hello World",
            "1/15/20 3:04 PMxyz",
        ],
    )
    def test_invalid(self, en_catalogue: DateTimeCatalogue, text: str):
        """Unreadable text, impossible dates and non-positive instants give None."""
        assert read_date_time(text) is None

    def test_not_initialized(self, monkeypatch: pytest.MonkeyPatch):
        """Reading before initialization gives None."""
        monkeypatch.setattr(date_parse, "_catalogue", None)
        assert read_date_time("1/15/2020 3:04 PM") is None

    def test_deterministic(self, en_catalogue: DateTimeCatalogue):
        """The same text always gives the same result."""
        results = {read_date_time("1/15/20 3:04 PM") for _ in range(5)}
        assert results == {INSTANT}

    @pytest.mark.parametrize("instant", [MIDNIGHT + 1800, MIDNIGHT + 12 * 3600, INSTANT])
    @pytest.mark.parametrize("system", ["en_US", "de_DE", "es_AR", "fr_FR", "ko_KR", "zh_TW"])
    def test_round_trip_every_format(self, system: str, instant: int):
        """Text rendered with any catalogue pattern reads back to the same instant."""
        catalogue = init_date_time_formats(system)
        for pattern in catalogue.patterns:
            text = format_datetime(datetime.fromtimestamp(instant, UTC), pattern, tzinfo=UTC, locale=catalogue.locale)
            assert read_date_time(text) == instant, (pattern, text)

    @pytest.mark.parametrize("system", ["es_AR", "zh_TW"])
    def test_every_system_format_compiles(self, system: str):
        """Patterns with spaced period names or flexible day periods stay in the catalogue."""
        catalogue = init_date_time_formats(system)
        assert list(catalogue.patterns) == build_date_time_formats([catalogue.locale, EN])

    @pytest.mark.parametrize("system", ["es_AR", "zh_TW"])
    def test_short_style_of_system_locale(self, system: str):
        """The short rendering of the system locale reads back."""
        init_date_time_formats(system)
        assert read_date_time(format_date(INSTANT, locale=system)) == INSTANT
