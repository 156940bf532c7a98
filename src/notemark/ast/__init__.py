#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/ast/__init__.py
"""Abstract Syntax Tree (AST) module for note documents.

The editor's loosely shaped JSON tree is parsed into these typed nodes before
rendering, which separates reading the input from producing each output
format.

The module consists of:

- nodes: AST node classes representing document structure
- visitors: Visitor pattern implementation for AST traversal

Examples
--------
Basic usage:

    >>> from notemark.ast import Document, Heading, Paragraph, Text
    >>> from notemark.renderers.markdown import MarkdownRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> MarkdownRenderer().render_to_string(doc)
    '# Title\\n\\nHello world'

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
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    TaskItem,
    TaskList,
    Text,
    ThematicBreak,
    UnknownNode,
    Underline,
    get_node_children,
)
from notemark.ast.visitors import NodeVisitor

__all__ = [
    # Base
    "Node",
    "NodeVisitor",
    "get_node_children",
    # Block nodes
    "Document",
    "Paragraph",
    "Heading",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "TaskList",
    "TaskItem",
    "ThematicBreak",
    "UnknownNode",
    # Inline nodes
    "Text",
    "Strong",
    "Emphasis",
    "Strikethrough",
    "Code",
    "Link",
    "Highlight",
    "Underline",
    "Subscript",
    "Superscript",
]
