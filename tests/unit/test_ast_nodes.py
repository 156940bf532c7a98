#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for AST node classes and the visitor pattern."""

import pytest

from notemark.ast import (
    BlockQuote,
    Document,
    Emphasis,
    Heading,
    Link,
    List,
    ListItem,
    NodeVisitor,
    Paragraph,
    TaskItem,
    TaskList,
    Text,
    ThematicBreak,
    UnknownNode,
    get_node_children,
)


class TextCollector(NodeVisitor):
    """Visitor that collects text content in document order."""

    def __init__(self):
        self.texts = []

    def _visit_all(self, nodes):
        for node in nodes:
            node.accept(self)

    def visit_document(self, node):
        self._visit_all(node.children)

    def visit_heading(self, node):
        self._visit_all(node.content)

    def visit_paragraph(self, node):
        self._visit_all(node.content)

    def visit_code_block(self, node):
        self._visit_all(node.content)

    def visit_block_quote(self, node):
        self._visit_all(node.children)

    def visit_list(self, node):
        self._visit_all(node.items)

    def visit_list_item(self, node):
        self._visit_all(node.children)

    def visit_task_list(self, node):
        self._visit_all(node.items)

    def visit_task_item(self, node):
        self._visit_all(node.children)

    def visit_thematic_break(self, node):
        pass

    def visit_unknown(self, node):
        self._visit_all(node.children)

    def visit_text(self, node):
        self.texts.append(node.content)

    def visit_strong(self, node):
        self._visit_all(node.content)

    visit_emphasis = visit_strong
    visit_strikethrough = visit_strong
    visit_code = visit_strong
    visit_link = visit_strong
    visit_highlight = visit_strong
    visit_underline = visit_strong
    visit_subscript = visit_strong
    visit_superscript = visit_strong


@pytest.mark.unit
class TestNodes:
    """Tests for node construction and helpers."""

    def test_defaults(self):
        """Test default field values."""
        assert Document().children == []
        assert Heading().level == 1
        assert List().ordered is False
        assert TaskItem().checked is False
        assert Paragraph().text_align is None

    def test_document_title(self):
        """Test the title property."""
        assert Document(metadata={"title": "Plan"}).title == "Plan"
        assert Document(metadata={"title": ""}).title is None
        assert Document().title is None

    def test_metadata_not_shared(self):
        """Test that default metadata dicts are independent."""
        first, second = Paragraph(), Paragraph()
        first.metadata["x"] = 1
        assert second.metadata == {}

    @pytest.mark.parametrize(
        "node,expected",
        [
            (Document(children=[ThematicBreak()]), [ThematicBreak()]),
            (Paragraph(content=[Text(content="a")]), [Text(content="a")]),
            (List(items=[ListItem()]), [ListItem()]),
            (TaskList(items=[TaskItem()]), [TaskItem()]),
            (BlockQuote(children=[Paragraph()]), [Paragraph()]),
            (UnknownNode(node_type="x", children=[Paragraph()]), [Paragraph()]),
            (Link(url="u", content=[Text(content="l")]), [Text(content="l")]),
            (Text(content="leaf"), []),
            (ThematicBreak(), []),
        ],
    )
    def test_get_node_children(self, node, expected):
        """Test child lookup across field names."""
        assert get_node_children(node) == expected


@pytest.mark.unit
class TestVisitor:
    """Tests for the visitor pattern."""

    def test_visitor_walks_document_order(self):
        """Test that accept dispatches to the matching visit method."""
        document = Document(
            children=[
                Heading(level=2, content=[Text(content="one")]),
                List(items=[ListItem(children=[Paragraph(content=[Emphasis(content=[Text(content="two")])])])]),
                TaskList(items=[TaskItem(children=[Paragraph(content=[Text(content="three")])])]),
                UnknownNode(node_type="x", children=[Paragraph(content=[Text(content="four")])]),
            ]
        )
        collector = TextCollector()
        document.accept(collector)
        assert collector.texts == ["one", "two", "three", "four"]
