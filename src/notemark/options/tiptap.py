#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/options/tiptap.py
"""Options for parsing editor JSON documents.

This module provides configuration options for reading the ProseMirror/TipTap
style JSON tree into the notemark AST.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from notemark.constants import DEFAULT_MAX_NESTING_DEPTH, DEFAULT_TIPTAP_STRICT_MODE
from notemark.options.base import BaseParserOptions


@dataclass(frozen=True)
class TiptapParserOptions(BaseParserOptions):
    """Options for parsing editor JSON documents.

    Parameters
    ----------
    strict_mode : bool, default = False
        Raise ParsingError on malformed node shapes (non-object children,
        non-list ``content``, non-object ``attrs`` and so on) instead of
        treating the offending field as absent.
    max_nesting_depth : int, default = 100
        Deepest node nesting that is parsed. Deeper subtrees are dropped
        with a warning (or rejected in strict mode), which bounds recursion
        for adversarial or self-referencing inputs.

    Examples
    --------
    Reject malformed trees:
        >>> options = TiptapParserOptions(strict_mode=True)

    """

    strict_mode: bool = field(
        default=DEFAULT_TIPTAP_STRICT_MODE,
        metadata={"help": "Fail on malformed node shapes instead of skipping them", "importance": "advanced"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum node nesting depth to parse", "type": int, "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate options.

        Raises
        ------
        ValueError
            If max_nesting_depth is not positive.

        """
        super().__post_init__()
        if self.max_nesting_depth <= 0:
            raise ValueError(f"max_nesting_depth must be positive, got {self.max_nesting_depth}")
