"""Content tree nodes consumed by the cascade.

Markup parsing lives outside this package; these classes only give the
resolver something concrete to walk and match against.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Union


class StyleTarget(Protocol):
    """Anything the resolver can match selectors against."""

    @property
    def tag_name(self) -> str: ...

    @property
    def id(self) -> str | None: ...

    @property
    def classes(self) -> frozenset[str]: ...


@dataclass(frozen=True)
class Text:
    """A text node. Never matched by selectors."""

    data: str
    children: tuple[Node, ...] = ()


@dataclass(frozen=True, eq=False)
class Element:
    """An element node with a tag name and an attribute map.

    Elements compare and hash by identity, so they can key per-node lookups.
    """

    tag_name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        if not self.tag_name:
            raise ValueError("Element tag_name must be a non-empty string")

    @property
    def id(self) -> str | None:
        return self.attributes.get("id")

    @property
    def classes(self) -> frozenset[str]:
        return frozenset(self.attributes.get("class", "").split())

    def __repr__(self) -> str:
        return f"<{self.tag_name}>"


Node = Union[Element, Text]
