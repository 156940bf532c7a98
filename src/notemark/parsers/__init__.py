#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that build the notemark AST."""

from notemark.parsers.base import BaseParser
from notemark.parsers.tiptap import TiptapParser

__all__ = ["BaseParser", "TiptapParser"]
