"""Tests for coordinate string validation and parsing."""

from __future__ import annotations

import pytest

from fakegps.exceptions import CoordinateError, InvalidFormatError, NumericOverflowError, NumericParseError
from fakegps.geolocation import _to_float, is_valid, parse
from fakegps.models.coordinate import LatLong

# ------------------------------------------------------------------
# is_valid
# ------------------------------------------------------------------


class TestIsValid:
    @pytest.mark.parametrize(
        "text",
        [
            "51.5074,-0.1278",
            "0,0",
            "-9,-180",
            "+12.5,+123.25",
            "51.5074, -0.1278",
            "51.5074,\t   -0.1278",
            "1,123",
            "99,200",
            "-90.000001,179.999999",
        ],
    )
    def test_accepts_well_formed(self, text: str) -> None:
        assert is_valid(text) is True

    @pytest.mark.parametrize("text", [None, "", "   ", "\t\n"])
    def test_blank_is_invalid(self, text: str | None) -> None:
        assert is_valid(text) is False

    @pytest.mark.parametrize(
        "text",
        [
            "abc,123",
            "999,50",
            "12,1234",
            "1,2,3",
            "51.5074",
            "51.5074 ,-0.1278",
            " 51.5074,-0.1278",
            "51.5074,-0.1278 ",
            "51.5074,-0.1278x",
            "51.,0",
            "51,.5",
            "51.5074;-0.1278",
            "--1,2",
            "1e3,2",
            "٣,4",
        ],
    )
    def test_rejects_malformed(self, text: str) -> None:
        assert is_valid(text) is False

    def test_out_of_range_latitude_is_syntactically_valid(self) -> None:
        # Range is not checked, only digit counts.
        assert is_valid("91,0") is True
        assert is_valid("0,999") is True


# ------------------------------------------------------------------
# parse
# ------------------------------------------------------------------


class TestParse:
    def test_london(self) -> None:
        assert parse("51.5074,-0.1278") == LatLong(latitude=51.5074, longitude=-0.1278)

    def test_whitespace_after_comma_is_trimmed(self) -> None:
        result = parse("-33.8688,   151.2093")
        assert result.latitude == -33.8688
        assert result.longitude == 151.2093

    def test_explicit_plus_sign(self) -> None:
        assert parse("+1,+2") == LatLong(latitude=1.0, longitude=2.0)

    @pytest.mark.parametrize(
        ("lat", "lon"),
        [("0", "0"), ("-1.5", "100.25"), ("89.999999", "-179.000001"), ("+7", "-42.125")],
    )
    def test_parts_round_trip_to_float(self, lat: str, lon: str) -> None:
        result = parse(f"{lat}, {lon}")
        assert result.latitude == pytest.approx(float(lat))
        assert result.longitude == pytest.approx(float(lon))

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank_raises_invalid_format(self, text: str | None) -> None:
        with pytest.raises(InvalidFormatError):
            parse(text)

    def test_too_many_parts_raises_invalid_format(self) -> None:
        with pytest.raises(InvalidFormatError):
            parse("1,2,3")

    def test_message_names_input_and_expected_format(self) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            parse("abc,123")

        exc = exc_info.value
        assert exc.value == "abc,123"
        assert "'abc,123'" in str(exc)
        assert "latitude,longitude" in str(exc)

    def test_format_errors_share_base(self) -> None:
        with pytest.raises(CoordinateError):
            parse("999,50")


class TestToFloat:
    def test_non_numeric_chains_value_error(self) -> None:
        with pytest.raises(NumericParseError) as exc_info:
            _to_float("abc", "abc,1")

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert exc_info.value.value == "abc,1"

    def test_out_of_float_range_is_overflow(self) -> None:
        with pytest.raises(NumericOverflowError):
            _to_float("1e400", "1e400,1")

    def test_trims_before_conversion(self) -> None:
        assert _to_float("  -0.1278 ", "x") == -0.1278
