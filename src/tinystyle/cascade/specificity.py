"""Selector specificity."""

from __future__ import annotations

from typing import NamedTuple

from tinystyle.model.stylesheet import Selector, SimpleSelector


class Specificity(NamedTuple):
    """Priority of a selector, compared lexicographically.

    Ids weigh most, then classes, then tag names.
    """

    ids: int
    classes: int
    tags: int


def specificity(selector: Selector) -> Specificity:
    """Return the specificity of *selector*."""
    if isinstance(selector, SimpleSelector):
        return Specificity(
            ids=1 if selector.id is not None else 0,
            classes=len(selector.classes),
            tags=1 if selector.tag_name is not None else 0,
        )
    raise TypeError(f"Unsupported selector type: {type(selector).__name__}")
