"""Hand-written recursive-descent parser for stylesheets.

Syntax example:
    h1, h2, h3 { margin: auto; color: #cc0000; }
    div.note { margin-bottom: 20px; padding: 10px; }
    #answer { display: none; }
"""

from __future__ import annotations

import logging

from tinystyle.cascade.specificity import specificity
from tinystyle.model.stylesheet import (
    Declaration,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
)
from tinystyle.parser.errors import (
    MalformedDeclaration,
    OutOfBounds,
    ParseError,
    UnexpectedInput,
    UnexpectedSelectorChar,
    UnterminatedBlock,
)
from tinystyle.parser.values import ValueParser, is_identifier_char

__all__ = ["StylesheetParser", "parse_stylesheet"]

log = logging.getLogger(__name__)


class StylesheetParser(ValueParser):
    """Parse rules, selectors, and declaration blocks."""

    # ---- declarations ----

    def parse_declaration(self) -> Declaration:
        start = self.position
        name = self.parse_identifier()
        if not name:
            raise self.error(MalformedDeclaration, "Expected a property name", start)
        try:
            self.skip_whitespace()
            self.expect(":")
            self.skip_whitespace()
            value = self.parse_value()
            self.skip_whitespace()
            self.expect(";")
        except UnexpectedInput as exc:
            raise self.error(
                MalformedDeclaration,
                f"Malformed declaration {name!r}: {exc.reason}",
                exc.position,
            ) from exc
        return Declaration(name=name, value=value)

    def parse_declaration_block(self) -> tuple[Declaration, ...]:
        start = self.position
        self.expect("{")
        declarations: list[Declaration] = []
        try:
            while True:
                self.skip_whitespace()
                if self.peek() == "}":
                    self.advance()
                    return tuple(declarations)
                declarations.append(self.parse_declaration())
        except OutOfBounds as exc:
            raise self.error(
                UnterminatedBlock, "Declaration block is never closed", start
            ) from exc

    # ---- selectors ----

    def parse_simple_selector(self) -> SimpleSelector:
        tag_name: str | None = None
        node_id: str | None = None
        classes: list[str] = []
        while not self.at_end():
            char = self.peek()
            if char == "#":
                self.advance()
                node_id = self._selector_identifier("#")
            elif char == ".":
                self.advance()
                name = self._selector_identifier(".")
                if name not in classes:
                    classes.append(name)
            elif char == "*":
                self.advance()
            elif is_identifier_char(char):
                tag_name = self.parse_identifier()
            else:
                break
        return SimpleSelector(tag_name=tag_name, id=node_id, classes=tuple(classes))

    def _selector_identifier(self, prefix: str) -> str:
        name = self.parse_identifier()
        if not name:
            raise self.error(
                UnexpectedSelectorChar, f"Expected a name after {prefix!r}"
            )
        return name

    def parse_selector_list(self) -> tuple[Selector, ...]:
        """Parse comma-separated selectors up to ``{``.

        The result is sorted by ascending specificity; selectors of equal
        specificity keep their source order.
        """
        selectors: list[Selector] = [self.parse_simple_selector()]
        while True:
            self.skip_whitespace()
            char = self.peek()
            if char == ",":
                self.advance()
                self.skip_whitespace()
                selectors.append(self.parse_simple_selector())
            elif char == "{":
                break
            else:
                raise self.error(
                    UnexpectedSelectorChar, f"Unexpected character {char!r} in selector list"
                )
        selectors.sort(key=specificity)
        return tuple(selectors)

    # ---- rules ----

    def parse_rule(self) -> Rule:
        selectors = self.parse_selector_list()
        return Rule(selectors=selectors, declarations=self.parse_declaration_block())

    def parse_rules(self) -> tuple[Rule, ...]:
        rules: list[Rule] = []
        while True:
            self.skip_whitespace()
            if self.at_end():
                return tuple(rules)
            rules.append(self.parse_rule())


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet *source* into a Stylesheet.

    Rules are returned in source order. Any syntax error aborts the whole
    parse with a :class:`ParseError` subclass.
    """
    parser = StylesheetParser(source)
    try:
        rules = parser.parse_rules()
    except ParseError as exc:
        log.debug(
            "Stylesheet parse failed: %s at line %s, column %s",
            type(exc).__name__,
            exc.line,
            exc.column,
        )
        raise
    log.debug("Parsed stylesheet: %d rule(s)", len(rules))
    return Stylesheet(rules=rules)
