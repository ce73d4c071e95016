"""Typed literal parsing: identifiers, hex colors, and lengths."""

from __future__ import annotations

import math
import string

from tinystyle.model.values import Color, Keyword, Length, Unit, Value
from tinystyle.parser.errors import (
    EmptyValue,
    InvalidColor,
    MalformedNumber,
    UnknownUnit,
)
from tinystyle.parser.scanner import Scanner

_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-_")
_NUMBER_CHARS = frozenset(string.digits + ".")
_UNITS = {unit.value: unit for unit in Unit}


def is_identifier_char(char: str) -> bool:
    return char in _IDENTIFIER_CHARS


class ValueParser(Scanner):
    """Scanner extended with the value grammar."""

    def parse_identifier(self) -> str:
        return self.consume_while(is_identifier_char)

    def parse_hex_byte(self) -> int:
        start = self.position
        digits = ""
        while len(digits) < 2 and not self.at_end():
            digits += self.advance()
        if len(digits) < 2 or not all(char in string.hexdigits for char in digits):
            raise self.error(InvalidColor, f"Invalid hex color byte {digits!r}", start)
        return int(digits, 16)

    def parse_color(self) -> Color:
        """Parse ``#rrggbb``. Alpha is always fully opaque."""
        self.expect("#")
        return Color(
            r=self.parse_hex_byte(),
            g=self.parse_hex_byte(),
            b=self.parse_hex_byte(),
            a=255,
        )

    def parse_unit(self) -> Unit:
        start = self.position
        text = self.parse_identifier().lower()
        try:
            return _UNITS[text]
        except KeyError:
            raise self.error(UnknownUnit, f"Unknown unit {text!r}", start) from None

    def parse_number(self) -> float:
        start = self.position
        text = self.consume_while(lambda char: char in _NUMBER_CHARS)
        try:
            magnitude = float(text)
        except ValueError:
            raise self.error(MalformedNumber, f"Malformed number {text!r}", start) from None
        if not math.isfinite(magnitude):
            raise self.error(MalformedNumber, "Number is out of range", start)
        return magnitude

    def parse_length(self) -> Length:
        magnitude = self.parse_number()
        return Length(magnitude, self.parse_unit())

    def parse_value(self) -> Value:
        """Dispatch on the next character: digit, ``#`` or identifier."""
        char = self.peek()
        if char in string.digits:
            return self.parse_length()
        if char == "#":
            return self.parse_color()
        if is_identifier_char(char):
            return Keyword(self.parse_identifier())
        raise self.error(EmptyValue, f"Expected a value but found {char!r}")
