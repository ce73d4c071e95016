from tinystyle.parser.errors import (
    EmptyValue,
    InvalidColor,
    MalformedDeclaration,
    MalformedNumber,
    OutOfBounds,
    ParseError,
    UnexpectedInput,
    UnexpectedSelectorChar,
    UnknownUnit,
    UnterminatedBlock,
)
from tinystyle.parser.rules import StylesheetParser, parse_stylesheet
from tinystyle.parser.scanner import Scanner
from tinystyle.parser.values import ValueParser

__all__ = [
    "EmptyValue",
    "InvalidColor",
    "MalformedDeclaration",
    "MalformedNumber",
    "OutOfBounds",
    "ParseError",
    "Scanner",
    "StylesheetParser",
    "UnexpectedInput",
    "UnexpectedSelectorChar",
    "UnknownUnit",
    "UnterminatedBlock",
    "ValueParser",
    "parse_stylesheet",
]
