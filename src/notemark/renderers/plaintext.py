#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/renderers/plaintext.py
"""Plain text rendering from AST.

This module provides the PlainTextRenderer class which converts AST nodes
to readable plain text. Inline formatting is stripped while block structure
stays visible: blank lines between blocks, ``#`` heading markers, bullet
glyphs for list entries, ``[x]``/``[ ]`` for tasks and ``> `` for quotes.
This is useful for:
- Search indexing
- Clipboard and preview text
- Exporting notes as ``.txt``

"""

from __future__ import annotations

from notemark.ast.nodes import (
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
from notemark.ast.visitors import NodeVisitor
from notemark.constants import DEFAULT_CODE_FENCE
from notemark.options.plaintext import PlainTextOptions
from notemark.renderers.base import BaseRenderer, InlineContentMixin


class PlainTextRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to plain text.

    Parameters
    ----------
    options : PlainTextOptions or None, default = None
        Plain text rendering options

    Examples
    --------
    Basic usage:

        >>> from notemark.ast import Document, Heading, Text, Strong
        >>> doc = Document(children=[
        ...     Heading(level=2, content=[
        ...         Text(content="Title with "),
        ...         Strong(content=[Text(content="bold")])
        ...     ])
        ... ])
        >>> print(PlainTextRenderer().render_to_string(doc))
        ## Title with bold

    """

    def __init__(self, options: PlainTextOptions | None = None):
        """Initialize the plain text renderer with options."""
        BaseRenderer._validate_options_type(options, PlainTextOptions, "plaintext")
        options = options or PlainTextOptions()
        BaseRenderer.__init__(self, options)
        self.options: PlainTextOptions = options
        self._output: list[str] = []

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to plain text string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Plain text output with surrounding whitespace removed

        """
        self._output = []
        document.accept(self)
        return "".join(self._output).strip()

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for child in node.children:
            child.accept(self)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(self._render_inline_content(node.content) + "\n\n")

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        content = self._render_inline_content(node.content)
        if self.options.heading_markers:
            self._output.append("#" * node.level + " " + content + "\n\n")
        else:
            self._output.append(content + "\n\n")

    def visit_list(self, node: List) -> None:
        """Render a bullet or ordered List node."""
        self._output.append(self._render_inline_content(node.items) + "\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        content = self._render_inline_content(node.children)
        self._output.append(self.options.list_item_prefix + content.strip() + "\n")

    def visit_task_list(self, node: TaskList) -> None:
        """Render a TaskList node."""
        self._output.append(self._render_inline_content(node.items) + "\n")

    def visit_task_item(self, node: TaskItem) -> None:
        """Render a TaskItem node."""
        content = self._render_inline_content(node.children)
        checkbox = "[x]" if node.checked else "[ ]"
        self._output.append(checkbox + " " + content.strip() + "\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node, keeping empty lines unprefixed."""
        content = self._render_inline_content(node.children)
        lines = [("> " + line if line else "") for line in content.split("\n")]
        self._output.append("\n".join(lines) + "\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as an unlabeled fence."""
        code = self._render_inline_content(node.content)
        if code and not code.endswith("\n"):
            code += "\n"
        self._output.append(f"{DEFAULT_CODE_FENCE}\n{code}{DEFAULT_CODE_FENCE}\n\n")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("\n---\n\n")

    def visit_unknown(self, node: UnknownNode) -> None:
        """Render the children of an unrecognized node."""
        for child in node.children:
            child.accept(self)

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(node.content)

    # Inline formatting is dropped; only the wrapped text is kept.

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_code(self, node: Code) -> None:
        """Render an inline Code node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_link(self, node: Link) -> None:
        """Render a Link node as its text only."""
        self._output.append(self._render_inline_content(node.content))

    def visit_highlight(self, node: Highlight) -> None:
        """Render a Highlight node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_underline(self, node: Underline) -> None:
        """Render an Underline node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_subscript(self, node: Subscript) -> None:
        """Render a Subscript node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_superscript(self, node: Superscript) -> None:
        """Render a Superscript node."""
        self._output.append(self._render_inline_content(node.content))
