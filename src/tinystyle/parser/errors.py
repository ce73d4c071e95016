"""Parser error types.

Every error is fatal to the parse that raised it: no partial stylesheet is
ever returned.
"""

from __future__ import annotations


class ParseError(Exception):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self,
        message: str,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.reason = message
        self.position = position
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class UnexpectedInput(ParseError):
    """An expected literal character was not found at the cursor."""


class MalformedDeclaration(UnexpectedInput):
    """A declaration is missing its name, ``:`` or ``;``."""


class UnexpectedSelectorChar(UnexpectedInput):
    """A selector list contains a character that starts no selector part."""


class OutOfBounds(ParseError):
    """Input was read past its end."""


class UnterminatedBlock(OutOfBounds):
    """A declaration block reached end of input before its closing brace."""


class InvalidColor(ParseError):
    """A color component is not a two-digit hex literal."""


class UnknownUnit(ParseError):
    """A length carries a unit other than ``px``."""


class MalformedNumber(ParseError):
    """A numeric literal does not convert to a float."""


class EmptyValue(ParseError):
    """A value position holds a character that starts no value form."""
