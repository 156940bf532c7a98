#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the notemark parser and renderers.

Every options class is a frozen dataclass. Use ``create_updated`` to derive
a modified copy and ``from_dict`` to build one from a configuration mapping.
"""

from notemark.options.base import UNSET, BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from notemark.options.html import HtmlRendererOptions
from notemark.options.markdown import MarkdownRendererOptions
from notemark.options.plaintext import PlainTextOptions
from notemark.options.tiptap import TiptapParserOptions

__all__ = [
    "UNSET",
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
    "PlainTextOptions",
    "TiptapParserOptions",
]
