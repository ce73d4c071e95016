from tinystyle.model.dom import Element, Node, StyleTarget, Text
from tinystyle.model.stylesheet import Declaration, Rule, Selector, SimpleSelector, Stylesheet
from tinystyle.model.values import (
    BLACK,
    Color,
    Display,
    Keyword,
    Length,
    Unit,
    Value,
)

__all__ = [
    "BLACK",
    "Color",
    "Declaration",
    "Display",
    "Element",
    "Keyword",
    "Length",
    "Node",
    "Rule",
    "Selector",
    "SimpleSelector",
    "StyleTarget",
    "Stylesheet",
    "Text",
    "Unit",
    "Value",
]
