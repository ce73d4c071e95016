"""Tests for the style tree and concurrent resolution."""

import pytest

from tinystyle.cascade import StyledNode, resolve_many, specified_values, style_tree
from tinystyle.config import StyleConfig
from tinystyle.model import BLACK, Color, Display, Element, Keyword, Stylesheet, Text
from tinystyle.parser import UnexpectedInput, parse_stylesheet

SHEET = parse_stylesheet(
    """
    div { display: block; }
    .note { color: #cc0000; }
    #answer { display: none; }
    """
)


def _document() -> Element:
    return Element(
        "body",
        children=(
            Element("div", {"class": "note"}, (Text("hello"),)),
            Element("p", {"id": "answer"}),
            Element("span"),
        ),
    )


class TestStyleTree:
    def test_shape_mirrors_content_tree(self):
        root = style_tree(_document(), SHEET)
        assert len(root.children) == 3
        assert len(root.children[0].children) == 1

    def test_references_content_nodes(self):
        doc = _document()
        root = style_tree(doc, SHEET)
        assert root.node is doc
        assert root.children[1].node is doc.children[1]

    def test_values(self):
        div = style_tree(_document(), SHEET).children[0]
        assert div.display() is Display.BLOCK
        assert div.value("color") == Color(204, 0, 0)
        assert div.value("margin") is None

    def test_display_none(self):
        assert style_tree(_document(), SHEET).children[1].display() is Display.NONE

    def test_text_nodes_are_unstyled(self):
        text = style_tree(_document(), SHEET).children[0].children[0]
        assert text.specified_values == {}
        assert text.display() is Display.INLINE

    def test_no_inheritance(self):
        text = style_tree(_document(), SHEET).children[0].children[0]
        assert text.value("color") is None

    def test_lookup(self):
        div = style_tree(_document(), SHEET).children[0]
        assert div.lookup("background-color", "color", BLACK) == Color(204, 0, 0)
        assert div.lookup("border-color", "outline-color", BLACK) == BLACK


class TestConfig:
    def test_default_display(self):
        root = style_tree(_document(), SHEET, StyleConfig(default_display=Display.BLOCK))
        assert root.children[2].display() is Display.BLOCK

    def test_user_agent_stylesheet_applies(self):
        config = StyleConfig(user_agent_stylesheet="span { display: block; }")
        root = style_tree(_document(), SHEET, config)
        assert root.children[2].display() is Display.BLOCK

    def test_author_overrides_user_agent(self):
        config = StyleConfig(user_agent_stylesheet="#answer { display: inline; }")
        root = style_tree(_document(), SHEET, config)
        assert root.children[1].display() is Display.NONE

    def test_author_wins_over_more_specific_user_agent_rule(self):
        config = StyleConfig(user_agent_stylesheet="div.note { display: inline; }")
        root = style_tree(_document(), SHEET, config)
        assert root.children[0].display() is Display.BLOCK

    def test_malformed_user_agent_sheet_fails_at_construction(self):
        with pytest.raises(UnexpectedInput):
            StyleConfig(user_agent_stylesheet="p { margin auto; }")

    def test_user_agent_sheet_parsed_once(self):
        config = StyleConfig(user_agent_stylesheet="span { display: block; }")
        assert isinstance(config.user_agent_rules, Stylesheet)
        assert len(config.user_agent_rules.rules) == 1
        assert resolve_many([Element("span")], SHEET, config) == [{"display": Keyword("block")}]

    def test_no_user_agent_sheet(self):
        assert StyleConfig().user_agent_rules is None

    def test_config_is_frozen(self):
        config = StyleConfig()
        with pytest.raises(AttributeError):
            config.max_workers = 2  # type: ignore[misc]


class TestResolveMany:
    def test_matches_sequential_results(self):
        nodes = [
            Element("div", {"class": "note"}),
            Element("p", {"id": "answer"}),
            Element("span"),
        ] * 10
        results = resolve_many(nodes, SHEET, StyleConfig(max_workers=4))
        assert results == [specified_values(n, SHEET) for n in nodes]

    def test_independent_maps(self):
        nodes = [Element("div"), Element("div")]
        first, second = resolve_many(nodes, SHEET)
        assert first == {"display": Keyword("block")}
        assert first is not second

    def test_empty(self):
        assert resolve_many([], SHEET) == []

    def test_styled_node_defaults(self):
        node = StyledNode(Text("x"))
        assert node.specified_values == {}
        assert node.children == ()
