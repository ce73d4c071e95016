"""Style tree: content nodes paired with their resolved property values."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Sequence

from tinystyle.cascade.resolver import (
    PropertyMap,
    display_of,
    lookup,
    specified_values,
)
from tinystyle.config import StyleConfig
from tinystyle.model.dom import Element, Node, StyleTarget
from tinystyle.model.stylesheet import Stylesheet
from tinystyle.model.values import Display, Value


@dataclass(frozen=True)
class StyledNode:
    """A content node with its specified values and styled children.

    The content tree is referenced, never copied or mutated.
    """

    node: Node
    specified_values: PropertyMap = field(default_factory=dict)
    children: tuple[StyledNode, ...] = ()
    default_display: Display = Display.INLINE

    def value(self, name: str) -> Value | None:
        return self.specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        return lookup(self.specified_values, name, fallback_name, default)

    def display(self) -> Display:
        return display_of(self.specified_values, self.default_display)


def style_tree(
    root: Node, stylesheet: Stylesheet, config: StyleConfig | None = None
) -> StyledNode:
    """Build the style tree for the content tree rooted at *root*.

    Rules from ``config.user_agent_stylesheet`` are applied before the author
    *stylesheet*, so author declarations always take precedence over them.
    """
    config = config or StyleConfig()
    return _style_node(root, _cascade_order(stylesheet, config), config)


def _cascade_order(stylesheet: Stylesheet, config: StyleConfig) -> list[Stylesheet]:
    if config.user_agent_rules is None:
        return [stylesheet]
    return [config.user_agent_rules, stylesheet]


def _resolve(node: StyleTarget, sheets: list[Stylesheet]) -> PropertyMap:
    values: PropertyMap = {}
    for sheet in sheets:
        values.update(specified_values(node, sheet))
    return values


def _style_node(node: Node, sheets: list[Stylesheet], config: StyleConfig) -> StyledNode:
    return StyledNode(
        node=node,
        specified_values=_resolve(node, sheets) if isinstance(node, Element) else {},
        children=tuple(_style_node(child, sheets, config) for child in node.children),
        default_display=config.default_display,
    )


def resolve_many(
    nodes: Sequence[StyleTarget],
    stylesheet: Stylesheet,
    config: StyleConfig | None = None,
) -> list[PropertyMap]:
    """Resolve *nodes* concurrently; results are in input order.

    The stylesheets are shared read-only between workers and each node gets
    its own freshly built map.
    """
    if not nodes:
        return []
    config = config or StyleConfig()
    sheets = _cascade_order(stylesheet, config)
    with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
        return list(pool.map(lambda node: _resolve(node, sheets), nodes))
