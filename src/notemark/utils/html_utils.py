#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/utils/html_utils.py
"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def build_style_attribute(declarations: dict[str, str]) -> str:
    """Render CSS declarations as an escaped ``style`` attribute.

    Returns an empty string when there is nothing to declare, so the result
    can be appended to an opening tag unconditionally.

    Examples
    --------
        >>> build_style_attribute({"text-align": "center"})
        ' style="text-align: center"'
        >>> build_style_attribute({})
        ''

    """
    if not declarations:
        return ""
    css = "; ".join(f"{prop}: {value}" for prop, value in declarations.items())
    return f' style="{escape_html(css)}"'


__all__ = ["escape_html", "build_style_attribute"]
