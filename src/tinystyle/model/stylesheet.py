"""Stylesheet model: SimpleSelector, Declaration, Rule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tinystyle.model.values import Value


@dataclass(frozen=True)
class SimpleSelector:
    """A selector made of an optional tag name, an optional id and class names.

    A ``None`` tag name (written ``*`` or left out) matches any tag; a selector
    with no components at all matches every element.
    """

    tag_name: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()

    @property
    def is_universal(self) -> bool:
        return self.tag_name is None and self.id is None and not self.classes

    def __str__(self) -> str:
        text = self.tag_name or ""
        if self.id is not None:
            text += f"#{self.id}"
        text += "".join(f".{name}" for name in self.classes)
        return text or "*"


# Only simple selectors exist today; new shapes are added to this union.
Selector = Union[SimpleSelector]


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value;`` pair inside a rule body."""

    name: str
    value: Value


@dataclass(frozen=True)
class Rule:
    """Selectors sharing one declaration block.

    ``selectors`` is ordered by ascending specificity; the rule applies to a
    node when any of them matches.
    """

    selectors: tuple[Selector, ...]
    declarations: tuple[Declaration, ...] = ()

    def __post_init__(self) -> None:
        if not self.selectors:
            raise ValueError("Rule must have at least one selector")


@dataclass(frozen=True)
class Stylesheet:
    """A collection of rules in source order."""

    rules: tuple[Rule, ...] = ()
