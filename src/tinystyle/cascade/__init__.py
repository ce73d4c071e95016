from tinystyle.cascade.resolver import (
    MatchedRule,
    PropertyMap,
    display_of,
    lookup,
    match_rule,
    matching_rules,
    selector_matches,
    specified_values,
)
from tinystyle.cascade.specificity import Specificity, specificity
from tinystyle.cascade.style_tree import StyledNode, resolve_many, style_tree

__all__ = [
    "MatchedRule",
    "PropertyMap",
    "Specificity",
    "StyledNode",
    "display_of",
    "lookup",
    "match_rule",
    "matching_rules",
    "resolve_many",
    "selector_matches",
    "specificity",
    "specified_values",
    "style_tree",
]
