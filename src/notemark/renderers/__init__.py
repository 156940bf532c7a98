#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers converting the notemark AST into output formats."""

from notemark.renderers.base import BaseRenderer, InlineContentMixin
from notemark.renderers.html import HtmlRenderer
from notemark.renderers.markdown import MarkdownRenderer
from notemark.renderers.plaintext import PlainTextRenderer

__all__ = [
    "BaseRenderer",
    "InlineContentMixin",
    "HtmlRenderer",
    "MarkdownRenderer",
    "PlainTextRenderer",
]
