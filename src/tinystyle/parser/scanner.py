"""Cursor over stylesheet source text."""

from __future__ import annotations

from typing import Callable

from tinystyle.parser.errors import OutOfBounds, ParseError, UnexpectedInput


class Scanner:
    """Owns the source text and the position of the next unread character.

    The position indexes decoded text, so a character outside ASCII is
    consumed in one step however many bytes it takes in UTF-8.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def peek(self) -> str:
        """Return the next character without consuming it."""
        if self.at_end():
            raise self.error(OutOfBounds, "Unexpected end of input")
        return self.source[self.position]

    def advance(self) -> str:
        """Consume and return the next character."""
        char = self.peek()
        self.position += 1
        return char

    def expect(self, char: str) -> None:
        """Consume the next character, which must be *char*."""
        start = self.position
        found = self.advance()
        if found != char:
            raise self.error(
                UnexpectedInput, f"Expected {char!r} but found {found!r}", start
            )

    def consume_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.position
        while not self.at_end() and predicate(self.source[self.position]):
            self.position += 1
        return self.source[start : self.position]

    def skip_whitespace(self) -> None:
        self.consume_while(str.isspace)

    def location(self, position: int | None = None) -> tuple[int, int]:
        """Return the 1-based (line, column) of *position* (default: cursor)."""
        if position is None:
            position = self.position
        position = min(position, len(self.source))
        line = self.source.count("\n", 0, position) + 1
        column = position - (self.source.rfind("\n", 0, position) + 1) + 1
        return line, column

    def error(
        self, kind: type[ParseError], message: str, position: int | None = None
    ) -> ParseError:
        """Build a *kind* error located at *position* (default: cursor)."""
        if position is None:
            position = self.position
        line, column = self.location(position)
        return kind(message, position=position, line=line, column=column)
