#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Renderers subclass ``NodeVisitor`` and implement one ``visit_*`` method per
node kind. Each node's ``accept()`` calls the matching method, so adding an
output format never touches the node classes.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a visit_* method for every node type. All visit
    methods accept a node and return Any (typically None for renderers that
    accumulate output as a side effect).

    Examples
    --------
    A visitor that collects all text runs:

        >>> class TextCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.parts = []
        ...
        ...     def visit_text(self, node):
        ...         self.parts.append(node.content)
        ...
        ...     # ... remaining visit_* methods recurse into children

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a bullet or ordered List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_task_list(self, node: TaskList) -> Any:
        """Visit a TaskList node."""
        pass

    @abstractmethod
    def visit_task_item(self, node: TaskItem) -> Any:
        """Visit a TaskItem node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_unknown(self, node: UnknownNode) -> Any:
        """Visit a node of an unrecognized type."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit an inline Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_highlight(self, node: Highlight) -> Any:
        """Visit a Highlight node."""
        pass

    @abstractmethod
    def visit_underline(self, node: Underline) -> Any:
        """Visit an Underline node."""
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""
        pass

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for unhandled node types.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
