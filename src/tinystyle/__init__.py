"""A minimal style-sheet engine: parse a small CSS subset and cascade it onto content nodes."""

from tinystyle.cascade import (
    PropertyMap,
    Specificity,
    StyledNode,
    display_of,
    lookup,
    resolve_many,
    specificity,
    specified_values,
    style_tree,
)
from tinystyle.config import StyleConfig
from tinystyle.model import (
    Color,
    Declaration,
    Display,
    Element,
    Keyword,
    Length,
    Rule,
    SimpleSelector,
    Stylesheet,
    Text,
    Unit,
)
from tinystyle.parser import ParseError, parse_stylesheet

__version__ = "0.1.0"

__all__ = [
    "Color",
    "Declaration",
    "Display",
    "Element",
    "Keyword",
    "Length",
    "ParseError",
    "PropertyMap",
    "Rule",
    "SimpleSelector",
    "Specificity",
    "StyleConfig",
    "StyledNode",
    "Stylesheet",
    "Text",
    "Unit",
    "display_of",
    "lookup",
    "parse_stylesheet",
    "resolve_many",
    "specificity",
    "specified_values",
    "style_tree",
]
