#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering.

This module defines options for rendering the note AST to Markdown text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from notemark.constants import (
    DEFAULT_BULLET_SYMBOL,
    DEFAULT_EMPHASIS_SYMBOL,
    DEFAULT_LIST_INDENT_WIDTH,
    BulletSymbol,
    EmphasisSymbol,
)
from notemark.options.base import BaseRendererOptions


# src/notemark/options/markdown.py
@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Markdown rendering options for converting AST to Markdown text.

    Parameters
    ----------
    emphasis_symbol : {"\*", "\_"}, default "\_"
        Symbol to use for emphasis/italic formatting in Markdown.
    bullet_symbol : {"-", "\*", "+"}, default "-"
        Marker for bullet list entries.
    list_indent_width : int, default 2
        Number of spaces to use for each level of list indentation.

    Notes
    -----
    Text is emitted as-is. Markdown metacharacters in note text are not
    escaped, so a literal ``*`` typed into a note survives unchanged.

    """

    emphasis_symbol: EmphasisSymbol = field(
        default=DEFAULT_EMPHASIS_SYMBOL,  # type: ignore[arg-type]
        metadata={"help": "Symbol to use for emphasis/italic formatting", "choices": ["*", "_"], "importance": "core"},
    )
    bullet_symbol: BulletSymbol = field(
        default=DEFAULT_BULLET_SYMBOL,  # type: ignore[arg-type]
        metadata={"help": "Marker for bullet list items", "choices": ["-", "*", "+"], "importance": "advanced"},
    )
    list_indent_width: int = field(
        default=DEFAULT_LIST_INDENT_WIDTH,
        metadata={
            "help": "Number of spaces to use for each level of list indentation",
            "type": int,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate options.

        Raises
        ------
        ValueError
            If a symbol is not one of the supported choices or the indent
            width is negative.

        """
        super().__post_init__()
        if self.emphasis_symbol not in ("*", "_"):
            raise ValueError(f"emphasis_symbol must be '*' or '_', got {self.emphasis_symbol!r}")
        if self.bullet_symbol not in ("-", "*", "+"):
            raise ValueError(f"bullet_symbol must be one of '-', '*', '+', got {self.bullet_symbol!r}")
        if self.list_indent_width < 0:
            raise ValueError(f"list_indent_width must be non-negative, got {self.list_indent_width}")
