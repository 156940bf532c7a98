#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_renderer.py
"""Unit tests for MarkdownRenderer.

Tests cover:
- Rendering all node types to markdown
- Nested list indentation
- Render options (emphasis symbol, bullet symbol, indent width)
- Edge cases such as unclamped heading levels and unsafe fence languages

"""

import logging

import pytest

from notemark.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Highlight,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    TaskItem,
    TaskList,
    Text,
    ThematicBreak,
    Underline,
    UnknownNode,
)
from notemark.options import MarkdownRendererOptions
from notemark.renderers.markdown import MarkdownRenderer


def render(*children, title=None, **options):
    metadata = {"title": title} if title else {}
    document = Document(children=list(children), metadata=metadata)
    return MarkdownRenderer(MarkdownRendererOptions(**options)).render_to_string(document)


def para(*content):
    return Paragraph(content=[Text(content=c) if isinstance(c, str) else c for c in content])


def item(*children):
    return ListItem(children=list(children))


@pytest.mark.unit
class TestBasicRendering:
    """Tests for basic node rendering."""

    def test_render_empty_document(self):
        """Test rendering an empty document."""
        assert render() == ""

    def test_title_only(self):
        """Test that an empty document with a title renders just the heading."""
        assert render(title="Test") == "# Test"

    def test_title_and_paragraph(self):
        """Test the title heading followed by a paragraph."""
        assert render(para("Hello, World!"), title="Test") == "# Test\n\nHello, World!"

    def test_title_not_escaped(self):
        """Test that Markdown syntax in the title is emitted as-is."""
        assert render(title="*draft* <v2>") == "# *draft* <v2>"

    def test_heading_levels(self):
        """Test heading levels map to hash marks."""
        assert render(Heading(level=3, content=[Text(content="Hi")])) == "### Hi"

    def test_heading_level_not_clamped(self):
        """Test that levels above six are emitted unchanged."""
        assert render(Heading(level=9, content=[Text(content="Deep")])) == "######### Deep"

    def test_thematic_break(self):
        """Test horizontal rules."""
        assert render(para("a"), ThematicBreak(), para("b")) == "a\n\n\n---\n\nb"

    def test_unknown_node_renders_children_only(self):
        """Test that unknown nodes add no markup."""
        assert render(UnknownNode(node_type="mention", children=[para("@sam")])) == "@sam"


@pytest.mark.unit
class TestInlineMarks:
    """Tests for inline mark rendering."""

    @pytest.mark.parametrize(
        "node,expected",
        [
            (Strong(content=[Text(content="x")]), "**x**"),
            (Emphasis(content=[Text(content="x")]), "_x_"),
            (Strikethrough(content=[Text(content="x")]), "~~x~~"),
            (Code(content=[Text(content="x")]), "`x`"),
            (Highlight(content=[Text(content="x")], color="red"), "==x=="),
            (Underline(content=[Text(content="x")]), "<u>x</u>"),
            (Subscript(content=[Text(content="x")]), "<sub>x</sub>"),
            (Superscript(content=[Text(content="x")]), "<sup>x</sup>"),
            (Link(url="https://example.com", content=[Text(content="x")]), "[x](https://example.com)"),
            (Link(url="", content=[Text(content="x")]), "[x]()"),
        ],
    )
    def test_marks(self, node, expected):
        """Test each mark's Markdown form."""
        assert render(para(node)) == expected

    def test_nested_marks(self):
        """Test bold inside italic renders as _**hi**_."""
        assert render(para(Emphasis(content=[Strong(content=[Text(content="hi")])]))) == "_**hi**_"

    def test_asterisk_emphasis(self):
        """Test the emphasis_symbol option."""
        assert render(para(Emphasis(content=[Text(content="x")])), emphasis_symbol="*") == "*x*"

    def test_text_not_escaped(self):
        """Test that Markdown characters in text are emitted verbatim."""
        assert render(para("1 * 2 _ 3")) == "1 * 2 _ 3"


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_bullet_list(self):
        """Test a flat bullet list."""
        assert render(List(items=[item(para("one")), item(para("two"))])) == "- one\n- two"

    def test_ordered_list_numbered_from_one(self):
        """Test ordered list numbering per list."""
        result = render(
            List(ordered=True, items=[item(para("a")), item(para("b")), item(para("c"))]),
            List(ordered=True, items=[item(para("d"))]),
        )
        assert result == "1. a\n2. b\n3. c\n\n1. d"

    def test_nested_bullet_list_indented_two_spaces(self):
        """Test that a nested list is indented two spaces relative to its parent."""
        inner = List(items=[item(para("Child"))])
        result = render(List(items=[item(para("Parent"), inner)]))

        lines = [line for line in result.split("\n") if line.strip()]
        assert lines == ["- Parent", "  - Child"]

    def test_three_levels_of_nesting(self):
        """Test indentation grows with each level."""
        level3 = List(items=[item(para("three"))])
        level2 = List(ordered=True, items=[item(para("two"), level3)])
        result = render(List(items=[item(para("one"), level2)]))

        lines = [line for line in result.split("\n") if line.strip()]
        assert lines == ["- one", "  1. two", "    - three"]

    def test_list_indent_width(self):
        """Test the list_indent_width option."""
        inner = List(items=[item(para("Child"))])
        result = render(List(items=[item(para("Parent"), inner)]), list_indent_width=4)
        assert result.split("\n")[-1] == "    - Child"

    def test_bullet_symbol(self):
        """Test the bullet_symbol option."""
        assert render(List(items=[item(para("a"))]), bullet_symbol="*") == "* a"

    def test_task_list(self):
        """Test task list checkboxes."""
        result = render(
            TaskList(
                items=[
                    TaskItem(checked=True, children=[para("done")]),
                    TaskItem(checked=False, children=[para("todo")]),
                ]
            )
        )
        assert result == "- [x] done\n- [ ] todo"

    def test_task_list_inside_list_item_not_indented(self):
        """Test that task lists do not increase the indentation depth."""
        tasks = TaskList(items=[TaskItem(checked=False, children=[para("sub")])])
        inner = List(items=[item(para("Child"))])
        result = render(List(items=[item(para("Parent"), tasks, inner)]))

        lines = [line for line in result.split("\n") if line.strip()]
        assert lines == ["- Parent", "- [ ] sub", "  - Child"]


@pytest.mark.unit
class TestBlocks:
    """Tests for quotes and code blocks."""

    def test_block_quote_drops_blank_lines(self):
        """Test that each non-blank line is prefixed."""
        assert render(BlockQuote(children=[para("first"), para("second")])) == "> first\n> second"

    def test_code_block_with_language(self):
        """Test fenced code with a language."""
        result = render(CodeBlock(content=[Text(content="print(1)")], language="python"))
        assert result == "```python\nprint(1)\n```"

    def test_code_block_trailing_newline(self):
        """Test that the closing fence is always on its own line."""
        result = render(CodeBlock(content=[Text(content="a\nb\n")]))
        assert result == "```\na\nb\n```"

    def test_unsafe_language_dropped(self, caplog):
        """Test that a language that could break the fence is removed."""
        with caplog.at_level(logging.WARNING, logger="notemark"):
            result = render(CodeBlock(content=[Text(content="x")], language="py\n# injected"))
        assert result == "```\nx\n```"
        assert "language identifier" in caplog.text


@pytest.mark.unit
class TestFullDocument:
    """Tests for a document mixing all node kinds."""

    def test_sample_note(self, sample_note):
        """Test the full Markdown rendering of a note."""
        from notemark.api import to_markdown

        expected = (
            "## Plan\n\n"
            "Ship the **release** on _Friday_\n\n"
            "- one\n- two\n\n"
            "1. first\n2. second\n\n"
            "- [x] done\n- [ ] todo\n\n"
            "> quoted\n\n"
            "```python\nprint(1)\n```\n\n\n"
            "---\n\n"
            "end"
        )
        assert to_markdown(sample_note) == expected

    def test_renderer_is_reusable(self):
        """Test that list depth does not leak between calls."""
        renderer = MarkdownRenderer()
        inner = List(items=[item(para("Child"))])
        document = Document(children=[List(items=[item(para("Parent"), inner)])])
        assert renderer.render_to_string(document) == renderer.render_to_string(document)
