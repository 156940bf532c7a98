#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/ast/nodes.py
"""AST node classes for note document representation.

This module defines the closed node hierarchy a note document is parsed into.
Each node kind of the editor JSON has its own dataclass, so renderers dispatch
on type instead of probing optional fields at runtime. Node kinds that are not
recognized are kept as ``UnknownNode`` so their children still render.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document, Paragraph, Heading, CodeBlock, BlockQuote
    - List, ListItem, TaskList, TaskItem
    - ThematicBreak, UnknownNode

Inline nodes (one per editor mark, plus the text leaf):
    - Text
    - Strong, Emphasis, Strikethrough, Code
    - Link, Highlight
    - Underline, Subscript, Superscript

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata. Renderers read ``title`` from here.

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)

    @property
    def title(self) -> Optional[str]:
        """Return the document title stored in metadata, if any."""
        title = self.metadata.get("title")
        return title if title else None


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes
    text_align : str or None, default = None
        Alignment requested by the editor (``textAlign`` attribute)

    """

    content: list[Node] = field(default_factory=list)
    text_align: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading node.

    Parameters
    ----------
    level : int, default = 1
        Heading level. Not clamped here; the Markdown renderer emits it
        verbatim and the HTML renderer clamps it to 1-6.
    content : list of Node, default = empty list
        Inline nodes
    text_align : str or None, default = None
        Alignment requested by the editor

    """

    level: int = 1
    content: list[Node] = field(default_factory=list)
    text_align: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class CodeBlock(Node):
    """Fenced code block.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes holding the code text
    language : str or None, default = None
        Language identifier

    """

    content: list[Node] = field(default_factory=list)
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote containing block-level children."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """Bullet or ordered list.

    Parameters
    ----------
    ordered : bool, default = False
        True for an ordered (numbered) list
    items : list of Node, default = empty list
        List entries, normally ``ListItem`` nodes

    """

    ordered: bool = False
    items: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """Entry of a bullet or ordered list."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class TaskList(Node):
    """Checklist whose entries are ``TaskItem`` nodes."""

    items: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this task list."""
        return visitor.visit_task_list(self)


@dataclass
class TaskItem(Node):
    """Checklist entry.

    Parameters
    ----------
    checked : bool, default = False
        Whether the task is done
    children : list of Node, default = empty list
        Block-level content of the entry

    """

    checked: bool = False
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this task item."""
        return visitor.visit_task_item(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


@dataclass
class UnknownNode(Node):
    """Node of a kind this library does not know.

    Renders as the plain concatenation of its children, so content inside
    node types added by newer editor versions is not lost.

    Parameters
    ----------
    node_type : str
        The ``type`` string found in the source tree
    children : list of Node, default = empty list
        Parsed children

    """

    node_type: str = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""
        return visitor.visit_unknown(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text run."""

    content: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class Strong(Node):
    """Bold text (``bold`` mark)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""
        return visitor.visit_strong(self)


@dataclass
class Emphasis(Node):
    """Italic text (``italic`` mark)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""
        return visitor.visit_emphasis(self)


@dataclass
class Strikethrough(Node):
    """Struck-through text (``strike`` mark)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""
        return visitor.visit_strikethrough(self)


@dataclass
class Code(Node):
    """Inline code (``code`` mark).

    Holds nodes rather than a string because other marks may be applied
    before the code mark and end up inside it.

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Hyperlink (``link`` mark).

    Parameters
    ----------
    url : str, default = ""
        Link target, empty when the mark has no ``href``
    content : list of Node, default = empty list
        Link text nodes

    """

    url: str = ""
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Highlight(Node):
    """Highlighted text (``highlight`` mark).

    Parameters
    ----------
    content : list of Node, default = empty list
        Highlighted nodes
    color : str or None, default = None
        Requested background color; renderers fall back to their default

    """

    content: list[Node] = field(default_factory=list)
    color: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""
        return visitor.visit_highlight(self)


@dataclass
class Underline(Node):
    """Underlined text (``underline`` mark)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""
        return visitor.visit_underline(self)


@dataclass
class Subscript(Node):
    """Subscript text (``subscript`` mark)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""
        return visitor.visit_subscript(self)


@dataclass
class Superscript(Node):
    """Superscript text (``superscript`` mark)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""
        return visitor.visit_superscript(self)


def get_node_children(node: Node) -> list[Node]:
    """Return the child nodes of any node, regardless of its field name.

    Parameters
    ----------
    node : Node
        Node to inspect

    Returns
    -------
    list of Node
        Children in document order (empty for leaves)

    """
    if isinstance(node, (Document, BlockQuote, ListItem, TaskItem, UnknownNode)):
        return node.children
    if isinstance(node, (List, TaskList)):
        return node.items
    if isinstance(node, (Text, ThematicBreak)):
        return []
    return getattr(node, "content", [])
