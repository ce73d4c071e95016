"""Cascade resolution: match rules against a node and merge their declarations.

Matching rules are applied from lowest to highest priority, where priority is
the highest specificity among the rule's own matching selectors, with ties
broken by source order. Later writes overwrite earlier ones, so the most
specific, latest declaration of each property wins.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from tinystyle.cascade.specificity import Specificity, specificity
from tinystyle.model.dom import StyleTarget
from tinystyle.model.stylesheet import Rule, Selector, SimpleSelector, Stylesheet
from tinystyle.model.values import Display, Keyword, Value

log = logging.getLogger(__name__)

PropertyMap = dict[str, Value]

_DISPLAY_KEYWORDS = {display.value: display for display in Display}


class MatchedRule(NamedTuple):
    """A rule that applies to a node, with the key it is ordered by."""

    specificity: Specificity
    index: int
    rule: Rule


def selector_matches(selector: Selector, node: StyleTarget) -> bool:
    """Return True if *selector* matches *node*'s tag, id and classes."""
    if isinstance(selector, SimpleSelector):
        if selector.tag_name is not None and selector.tag_name != node.tag_name:
            return False
        if selector.id is not None and selector.id != node.id:
            return False
        classes = node.classes
        return all(name in classes for name in selector.classes)
    raise TypeError(f"Unsupported selector type: {type(selector).__name__}")


def match_rule(node: StyleTarget, rule: Rule) -> Specificity | None:
    """Return the rule's priority for *node*, or None if it does not apply.

    The priority is the maximum specificity over the selectors that match,
    whatever order the rule stores them in.
    """
    matched = [specificity(s) for s in rule.selectors if selector_matches(s, node)]
    return max(matched) if matched else None


def matching_rules(node: StyleTarget, stylesheet: Stylesheet) -> list[MatchedRule]:
    """Return every rule matching *node*, lowest priority first."""
    matches: list[MatchedRule] = []
    for index, rule in enumerate(stylesheet.rules):
        priority = match_rule(node, rule)
        if priority is not None:
            matches.append(MatchedRule(priority, index, rule))
    matches.sort(key=lambda m: (m.specificity, m.index))
    return matches


def specified_values(node: StyleTarget, stylesheet: Stylesheet) -> PropertyMap:
    """Resolve the property values that *stylesheet* assigns to *node*."""
    values: PropertyMap = {}
    matches = matching_rules(node, stylesheet)
    for match in matches:
        for declaration in match.rule.declarations:
            values[declaration.name] = declaration.value
    log.debug(
        "Resolved %d propert(ies) for <%s> from %d rule(s)",
        len(values),
        node.tag_name,
        len(matches),
    )
    return values


def lookup(values: PropertyMap, name: str, fallback_name: str, default: Value) -> Value:
    """Return *name*'s value, else *fallback_name*'s, else *default*."""
    if name in values:
        return values[name]
    if fallback_name in values:
        return values[fallback_name]
    return default


def display_of(values: PropertyMap, default: Display = Display.INLINE) -> Display:
    """Return the ``display`` keyword as a Display (inline when unrecognised)."""
    value = values.get("display")
    if isinstance(value, Keyword):
        return _DISPLAY_KEYWORDS.get(value.value, default)
    return default
