"""Test utilities for the notemark test suite.

Builders for editor JSON documents, so tests read as document structure
rather than nested dict literals.
"""

from typing import Any


def text(value: str, *marks: Any) -> dict:
    """Build a text node; marks may be type names or full mark dicts."""
    node: dict[str, Any] = {"type": "text", "text": value}
    if marks:
        node["marks"] = [{"type": m} if isinstance(m, str) else m for m in marks]
    return node


def paragraph(*content: dict, **attrs: Any) -> dict:
    """Build a paragraph node."""
    node: dict[str, Any] = {"type": "paragraph", "content": list(content)}
    if attrs:
        node["attrs"] = attrs
    return node


def heading(level: Any, *content: dict, **attrs: Any) -> dict:
    """Build a heading node."""
    return {"type": "heading", "attrs": {"level": level, **attrs}, "content": list(content)}


def bullet_list(*items: dict) -> dict:
    """Build a bullet list node."""
    return {"type": "bulletList", "content": list(items)}


def ordered_list(*items: dict) -> dict:
    """Build an ordered list node."""
    return {"type": "orderedList", "content": list(items)}


def list_item(*content: dict) -> dict:
    """Build a list item node."""
    return {"type": "listItem", "content": list(content)}


def task_list(*items: dict) -> dict:
    """Build a task list node."""
    return {"type": "taskList", "content": list(items)}


def task_item(checked: bool, *content: dict) -> dict:
    """Build a task item node."""
    return {"type": "taskItem", "attrs": {"checked": checked}, "content": list(content)}


def blockquote(*content: dict) -> dict:
    """Build a blockquote node."""
    return {"type": "blockquote", "content": list(content)}


def code_block(code: str, language: Any = None) -> dict:
    """Build a code block node holding one text node."""
    node: dict[str, Any] = {"type": "codeBlock", "content": [text(code)] if code else []}
    if language is not None:
        node["attrs"] = {"language": language}
    return node


def horizontal_rule() -> dict:
    """Build a horizontal rule node."""
    return {"type": "horizontalRule"}


def link(href: Any) -> dict:
    """Build a link mark."""
    return {"type": "link", "attrs": {"href": href}}


def highlight(color: Any = None) -> dict:
    """Build a highlight mark."""
    if color is None:
        return {"type": "highlight"}
    return {"type": "highlight", "attrs": {"color": color}}


def doc(*content: dict) -> dict:
    """Build a document root."""
    return {"type": "doc", "content": list(content)}
