"""Tests for coords module."""

import pytest

from mb_navformat.coords import CoordinateStyle, Pos, format_coords, parse_coordinates

MUNICH = Pos(lon=11 + 34.4 / 60, lat=48.12)


class TestParseCoordinates:
    """Tests for parse_coordinates function."""

    @pytest.mark.parametrize(
        "text",
        [
            "N48 07.2 E11 34.4",
            "n48 07.2 e11 34.4",
            "  N48   07.2  E11 34.4 ",
            "N 48° 7.2' E 11° 34.4'",
            "N 48° 7' 12\" E 11° 34' 24\"",
            "48° 7.2' N 11° 34.4' E",
            "480712N0113424E",
            "N 48° 7,2' E 11° 34,4'",
        ],
    )
    def test_munich(self, text: str):
        """All supported notations give the same position."""
        pos = parse_coordinates(text)
        assert pos is not None
        assert pos.lat == pytest.approx(MUNICH.lat)
        assert pos.lon == pytest.approx(MUNICH.lon)

    @pytest.mark.parametrize(
        ("text", "lat", "lon"),
        [
            ("4807N01134E", 48 + 7 / 60, 11 + 34 / 60),
            ("48.12N 11.5733E", 48.12, 11.5733),
            ("48.12, 11.5733", 48.12, 11.5733),
            ("-33.9 18.6", -33.9, 18.6),
            ("S22 54.0 W43 12.0", -22.9, -43.2),
            ("S 33° 55.0' E 18° 25.0'", -(33 + 55 / 60), 18 + 25 / 60),
        ],
    )
    def test_formats(self, text: str, lat: float, lon: float):
        """Hemispheres S and W give negative values, decimal input is latitude first."""
        pos = parse_coordinates(text)
        assert pos is not None
        assert pos.lat == pytest.approx(lat)
        assert pos.lon == pytest.approx(lon)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "hello",
            "N48 07.2",
            "N91 00.0 E11 00.0",
            "N48 07.2 E181 00.0",
            "N48 61.0 E11 00.0",
            "N48.5 07.2 E11 34.4",
            "95, 10",
            "9100N01134E",
        ],
    )
    def test_invalid(self, text: str):
        """Malformed or out-of-range input gives None."""
        assert parse_coordinates(text) is None


class TestPos:
    """Tests for Pos class."""

    @pytest.mark.parametrize(
        ("pos", "expected"),
        [
            (Pos(lon=0.0, lat=0.0), True),
            (Pos(lon=180.0, lat=-90.0), True),
            (Pos(lon=180.5, lat=0.0), False),
            (Pos(lon=0.0, lat=90.1), False),
        ],
    )
    def test_is_valid(self, pos: Pos, expected: bool):
        """Longitude within +/-180, latitude within +/-90."""
        assert pos.is_valid is expected


class TestFormatCoords:
    """Tests for format_coords function."""

    @pytest.mark.parametrize(
        ("style", "expected"),
        [
            (CoordinateStyle.DEG_MIN, "N 48° 7.2' E 11° 34.4'"),
            (CoordinateStyle.DEG_MIN_SEC, "N 48° 7' 12.0\" E 11° 34' 24.0\""),
            (CoordinateStyle.DECIMAL, "48.12000 11.57333"),
        ],
    )
    def test_styles(self, style: CoordinateStyle, expected: str):
        """Each style has its own canonical form."""
        assert format_coords(MUNICH, style) == expected

    def test_southern_western(self):
        """Negative values get S and W."""
        assert format_coords(Pos(lon=-43.2, lat=-22.9)) == "S 22° 54.0' W 43° 12.0'"

    def test_minute_rounding_carries_into_degree(self):
        """Minutes that round up to 60 carry into the degree."""
        assert format_coords(Pos(lon=10.99999, lat=47.99999)) == "N 48° 0.0' E 11° 0.0'"

    def test_locale_decimal_separator(self):
        """Minute fractions use the locale's decimal separator."""
        assert format_coords(MUNICH, locale="de_DE") == "N 48° 7,2' E 11° 34,4'"

    @pytest.mark.parametrize("style", list(CoordinateStyle))
    def test_canonical_reads_back(self, style: CoordinateStyle):
        """Canonical output is accepted by the parser."""
        pos = parse_coordinates(format_coords(MUNICH, style))
        assert pos is not None
        assert pos.lat == pytest.approx(MUNICH.lat, abs=1e-4)
        assert pos.lon == pytest.approx(MUNICH.lon, abs=1e-4)
