#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which converts note AST nodes to
HTML. Output is either a bare fragment (blocks concatenated without
separators) or a complete, print-friendly document with an embedded
stylesheet.

All text and every attribute value taken from the note is HTML-escaped.
Highlight colors and text alignment are additionally validated before they
are placed in ``style`` attributes, and script-capable link targets are
neutralized.

"""

from __future__ import annotations

import logging

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
from notemark.constants import DANGEROUS_LINK_REPLACEMENT
from notemark.options.html import HtmlRendererOptions
from notemark.renderers.base import BaseRenderer, InlineContentMixin
from notemark.utils.html_utils import build_style_attribute, escape_html
from notemark.utils.security import (
    is_url_scheme_dangerous,
    sanitize_css_color,
    sanitize_language_identifier,
    sanitize_text_align,
)

logger = logging.getLogger(__name__)

_DEFAULT_CSS = """\
* {
  box-sizing: border-box;
}
body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
  line-height: 1.6;
  color: #1a1a1a;
  max-width: 800px;
  margin: 0 auto;
  padding: 2rem;
  background-color: #fff;
}
h1, h2, h3, h4, h5, h6 {
  margin-top: 1.5em;
  margin-bottom: 0.5em;
  font-weight: 600;
  line-height: 1.3;
}
h1 { font-size: 2.25rem; border-bottom: 1px solid #e5e5e5; padding-bottom: 0.3em; }
h2 { font-size: 1.75rem; }
h3 { font-size: 1.5rem; }
p { margin: 1em 0; }
ul, ol { padding-left: 2em; margin: 1em 0; }
li { margin: 0.25em 0; }
.task-list { list-style: none; padding-left: 0; }
.task-item { display: flex; align-items: flex-start; gap: 0.5rem; }
.task-item input { margin-top: 0.35em; }
blockquote {
  border-left: 4px solid #e5e5e5;
  margin: 1em 0;
  padding: 0.5em 1em;
  color: #666;
  background-color: #f9f9f9;
}
pre {
  background-color: #f4f4f4;
  border-radius: 4px;
  padding: 1em;
  overflow-x: auto;
  font-size: 0.9em;
}
code {
  font-family: 'Menlo', 'Monaco', 'Courier New', monospace;
  background-color: #f4f4f4;
  padding: 0.2em 0.4em;
  border-radius: 3px;
  font-size: 0.9em;
}
pre code {
  background-color: transparent;
  padding: 0;
}
a {
  color: #0066cc;
  text-decoration: none;
}
a:hover {
  text-decoration: underline;
}
hr {
  border: none;
  border-top: 1px solid #e5e5e5;
  margin: 2em 0;
}
mark {
  padding: 0.1em 0.2em;
  border-radius: 2px;
}
@media print {
  body { max-width: none; padding: 1cm; }
  pre { white-space: pre-wrap; word-wrap: break-word; }
}"""


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from notemark.ast import Document, Paragraph, Text
        >>> from notemark.options import HtmlRendererOptions
        >>> doc = Document(
        ...     children=[Paragraph(content=[Text(content="Hello, World!")])],
        ...     metadata={"title": "Test"},
        ... )
        >>> HtmlRenderer(HtmlRendererOptions(standalone=False)).render_to_string(doc)
        '<h1>Test</h1>\\n<p>Hello, World!</p>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to HTML string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            HTML fragment, or a complete document when ``standalone`` is set

        """
        self._output = []
        document.accept(self)
        body = "".join(self._output)

        title = document.title
        if title:
            heading = f"<h1>{escape_html(title)}</h1>"
            content = f"{heading}\n{body}" if body else heading
        else:
            content = body

        if self.options.standalone:
            return self._wrap_in_document(document, content)
        return content

    def _wrap_in_document(self, doc: Document, content: str) -> str:
        """Wrap content in a complete HTML document.

        Parameters
        ----------
        doc : Document
            Document node with metadata
        content : str
            Rendered HTML content

        Returns
        -------
        str
            Complete HTML document

        """
        title = doc.title or self.options.default_title

        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{escape_html(self.options.language)}">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape_html(title)}</title>",
        ]

        if self.options.css_style == "embedded":
            parts.append("<style>")
            parts.append(self._generate_default_css())
            parts.append("</style>")

        parts.append("</head>")
        parts.append("<body>")
        parts.append(content)
        parts.append("</body>")
        parts.append("</html>")

        return "\n".join(parts)

    @staticmethod
    def _generate_default_css() -> str:
        """Return the embedded stylesheet, including print rules."""
        return _DEFAULT_CSS

    def _align_style(self, text_align: str | None) -> str:
        if not text_align:
            return ""
        if self.options.sanitize_style_values:
            text_align = sanitize_text_align(text_align)
            if text_align is None:
                return ""
        return build_style_attribute({"text-align": text_align})

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for child in node.children:
            child.accept(self)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<p{self._align_style(node.text_align)}>{content}</p>")

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node, clamping the level to 1-6."""
        level = max(1, min(6, node.level))
        content = self._render_inline_content(node.content)
        self._output.append(f"<h{level}{self._align_style(node.text_align)}>{content}</h{level}>")

    def visit_list(self, node: List) -> None:
        """Render a bullet or ordered List node."""
        tag = "ol" if node.ordered else "ul"
        self._output.append(f"<{tag}>{self._render_inline_content(node.items)}</{tag}>")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        self._output.append(f"<li>{self._render_inline_content(node.children)}</li>")

    def visit_task_list(self, node: TaskList) -> None:
        """Render a TaskList node."""
        self._output.append(f'<ul class="task-list">{self._render_inline_content(node.items)}</ul>')

    def visit_task_item(self, node: TaskItem) -> None:
        """Render a TaskItem node with a disabled checkbox."""
        checkbox = '<input type="checkbox" checked disabled />' if node.checked else '<input type="checkbox" disabled />'
        content = self._render_inline_content(node.children)
        self._output.append(f'<li class="task-item">{checkbox}{content}</li>')

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node."""
        self._output.append(f"<blockquote>{self._render_inline_content(node.children)}</blockquote>")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node."""
        language = sanitize_language_identifier(node.language) if node.language else ""
        code = self._render_inline_content(node.content)
        if language:
            self._output.append(f'<pre><code class="language-{escape_html(language)}">{code}</code></pre>')
        else:
            self._output.append(f"<pre><code>{code}</code></pre>")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("<hr />")

    def visit_unknown(self, node: UnknownNode) -> None:
        """Render the children of an unrecognized node without a wrapper."""
        self._output.append(self._render_inline_content(node.children))

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(escape_html(node.content))

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(f"<strong>{self._render_inline_content(node.content)}</strong>")

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(f"<em>{self._render_inline_content(node.content)}</em>")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._output.append(f"<s>{self._render_inline_content(node.content)}</s>")

    def visit_code(self, node: Code) -> None:
        """Render an inline Code node."""
        self._output.append(f"<code>{self._render_inline_content(node.content)}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        url = node.url
        if self.options.block_dangerous_links and is_url_scheme_dangerous(url):
            logger.warning(f"Blocked dangerous link target: {url[:50]!r}")
            url = DANGEROUS_LINK_REPLACEMENT

        attrs = f'href="{escape_html(url)}"'
        if self.options.link_target_blank:
            attrs += ' target="_blank" rel="noopener noreferrer"'
        self._output.append(f"<a {attrs}>{self._render_inline_content(node.content)}</a>")

    def visit_highlight(self, node: Highlight) -> None:
        """Render a Highlight node as ``<mark>`` with a background color."""
        default = self.options.default_highlight_color
        if self.options.sanitize_style_values:
            color = sanitize_css_color(node.color, default)
        else:
            color = node.color or default
        style = build_style_attribute({"background-color": color})
        self._output.append(f"<mark{style}>{self._render_inline_content(node.content)}</mark>")

    def visit_underline(self, node: Underline) -> None:
        """Render an Underline node."""
        self._output.append(f"<u>{self._render_inline_content(node.content)}</u>")

    def visit_subscript(self, node: Subscript) -> None:
        """Render a Subscript node."""
        self._output.append(f"<sub>{self._render_inline_content(node.content)}</sub>")

    def visit_superscript(self, node: Superscript) -> None:
        """Render a Superscript node."""
        self._output.append(f"<sup>{self._render_inline_content(node.content)}</sup>")
