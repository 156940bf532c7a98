#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/renderers/markdown.py
"""Markdown rendering from AST.

This module provides the MarkdownRenderer class which converts note AST nodes
to Markdown text. Marks without a Markdown equivalent (underline, subscript,
superscript) are emitted as inline HTML tags; highlights use the ``==text==``
extension.

List nesting follows the editor structure: the indent grows by
``list_indent_width`` spaces each time the renderer descends into an entry of
a bullet or ordered list. Task lists keep the depth of their parent and are
never indented.

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
from notemark.options.markdown import MarkdownRendererOptions
from notemark.renderers.base import BaseRenderer, InlineContentMixin
from notemark.utils.security import sanitize_language_identifier


class MarkdownRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    r"""Render AST nodes to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
        >>> from notemark.ast import Document, Paragraph, Strong, Emphasis, Text
        >>> doc = Document(
        ...     children=[Paragraph(content=[Emphasis(content=[Strong(content=[Text(content="hi")])])])],
        ...     metadata={"title": "Note"},
        ... )
        >>> MarkdownRenderer().render_to_string(doc)
        '# Note\n\n_**hi**_'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []
        self._list_depth: int = 0

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to Markdown.

        A document title (``document.metadata["title"]``) is emitted as a
        level-1 heading before the body. The result has surrounding
        whitespace removed.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Markdown text

        """
        self._output = []
        self._list_depth = 0
        document.accept(self)
        return "".join(self._output).strip()

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        if node.title:
            self._output.append(f"# {node.title}\n\n")
        for child in node.children:
            child.accept(self)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(self._render_inline_content(node.content) + "\n\n")

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node; the level is not clamped."""
        content = self._render_inline_content(node.content)
        self._output.append("#" * node.level + " " + content + "\n\n")

    def visit_list(self, node: List) -> None:
        """Render a bullet or ordered List node."""
        depth = self._list_depth
        indent = " " * (self.options.list_indent_width * depth)
        lines = []
        for idx, item in enumerate(node.items):
            marker = f"{idx + 1}. " if node.ordered else f"{self.options.bullet_symbol} "
            self._list_depth = depth + 1
            try:
                item_content = self._render_inline_content([item])
            finally:
                self._list_depth = depth
            lines.append(indent + marker + item_content.strip())
        self._output.append("\n".join(lines) + "\n\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        self._output.append(self._render_inline_content(node.children))

    def visit_task_list(self, node: TaskList) -> None:
        """Render a TaskList node as ``- [x]`` entries."""
        lines = []
        for item in node.items:
            checked = isinstance(item, TaskItem) and item.checked
            checkbox = "[x]" if checked else "[ ]"
            item_content = self._render_inline_content([item])
            lines.append(f"{self.options.bullet_symbol} {checkbox} " + item_content.strip())
        self._output.append("\n".join(lines) + "\n\n")

    def visit_task_item(self, node: TaskItem) -> None:
        """Render a TaskItem node."""
        self._output.append(self._render_inline_content(node.children))

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node, dropping blank lines."""
        content = self._render_inline_content(node.children)
        lines = ["> " + line for line in content.split("\n") if line.strip()]
        self._output.append("\n".join(lines) + "\n\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a fenced block."""
        language = sanitize_language_identifier(node.language) if node.language else ""
        code = self._render_inline_content(node.content)
        if code and not code.endswith("\n"):
            code += "\n"
        self._output.append(f"{DEFAULT_CODE_FENCE}{language}\n{code}{DEFAULT_CODE_FENCE}\n\n")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("\n---\n\n")

    def visit_unknown(self, node: UnknownNode) -> None:
        """Render the children of an unrecognized node without markup."""
        self._output.append(self._render_inline_content(node.children))

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node verbatim."""
        self._output.append(node.content)

    def _wrap(self, content: str, prefix: str, suffix: str | None = None) -> None:
        self._output.append(prefix + content + (prefix if suffix is None else suffix))

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._wrap(self._render_inline_content(node.content), "**")

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._wrap(self._render_inline_content(node.content), self.options.emphasis_symbol)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._wrap(self._render_inline_content(node.content), "~~")

    def visit_code(self, node: Code) -> None:
        """Render an inline Code node."""
        self._wrap(self._render_inline_content(node.content), "`")

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        text = self._render_inline_content(node.content)
        self._output.append(f"[{text}]({node.url})")

    def visit_highlight(self, node: Highlight) -> None:
        """Render a Highlight node; the color is not representable."""
        self._wrap(self._render_inline_content(node.content), "==")

    def visit_underline(self, node: Underline) -> None:
        """Render an Underline node as an HTML tag."""
        self._wrap(self._render_inline_content(node.content), "<u>", "</u>")

    def visit_subscript(self, node: Subscript) -> None:
        """Render a Subscript node as an HTML tag."""
        self._wrap(self._render_inline_content(node.content), "<sub>", "</sub>")

    def visit_superscript(self, node: Superscript) -> None:
        """Render a Superscript node as an HTML tag."""
        self._wrap(self._render_inline_content(node.content), "<sup>", "</sup>")
