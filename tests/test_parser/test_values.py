"""Tests for typed value literals."""

import pytest

from tinystyle.model import Color, Keyword, Length, Unit
from tinystyle.parser import (
    EmptyValue,
    InvalidColor,
    MalformedNumber,
    UnknownUnit,
    ValueParser,
)


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


class TestIdentifier:
    def test_letters_digits_hyphen_underscore(self):
        p = ValueParser("margin-bottom_2:")
        assert p.parse_identifier() == "margin-bottom_2"
        assert p.peek() == ":"

    def test_stops_at_non_ascii(self):
        p = ValueParser("abcé")
        assert p.parse_identifier() == "abc"

    def test_empty(self):
        assert ValueParser(";").parse_identifier() == ""


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class TestColor:
    def test_parse_color(self):
        assert ValueParser("#cc0000").parse_color() == Color(204, 0, 0, 255)

    def test_uppercase_hex(self):
        assert ValueParser("#FFa01B").parse_color() == Color(255, 160, 27, 255)

    def test_invalid_hex_digit(self):
        with pytest.raises(InvalidColor):
            ValueParser("#zz0000").parse_color()

    def test_short_form_is_rejected(self):
        with pytest.raises(InvalidColor):
            ValueParser("#fff;").parse_color()

    def test_hex_byte(self):
        assert ValueParser("7f").parse_hex_byte() == 127

    def test_truncated_component(self):
        with pytest.raises(InvalidColor):
            ValueParser("#ab").parse_color()

    def test_single_trailing_digit(self):
        with pytest.raises(InvalidColor):
            ValueParser("#abcde").parse_color()


# ---------------------------------------------------------------------------
# Lengths
# ---------------------------------------------------------------------------


class TestLength:
    def test_integer_px(self):
        assert ValueParser("20px").parse_length() == Length(20.0, Unit.PX)

    def test_decimal_px(self):
        assert ValueParser("1.5px").parse_length() == Length(1.5, Unit.PX)

    def test_unit_is_case_insensitive(self):
        assert ValueParser("3PX").parse_length() == Length(3.0, Unit.PX)

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnit):
            ValueParser("2em").parse_length()

    def test_missing_unit(self):
        with pytest.raises(UnknownUnit):
            ValueParser("2;").parse_length()

    def test_malformed_number(self):
        with pytest.raises(MalformedNumber):
            ValueParser("1.2.3px").parse_length()

    def test_overflowing_number(self):
        with pytest.raises(MalformedNumber):
            ValueParser("9" * 400 + "px").parse_length()

    def test_large_finite_number(self):
        assert ValueParser("1" + "0" * 300 + "px").parse_length().magnitude == 1e300

    def test_to_px(self):
        assert Length(12.0, Unit.PX).to_px() == 12.0
        assert Keyword("auto").to_px() == 0.0
        assert Color(1, 2, 3).to_px() == 0.0


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class TestParseValue:
    def test_keyword(self):
        assert ValueParser("auto;").parse_value() == Keyword("auto")

    def test_length(self):
        assert ValueParser("10px;").parse_value() == Length(10.0, Unit.PX)

    def test_color(self):
        assert ValueParser("#000000;").parse_value() == Color(0, 0, 0, 255)

    def test_empty_value(self):
        with pytest.raises(EmptyValue):
            ValueParser(";").parse_value()
