#  Copyright (c) 2025 Tom Villani, Ph.D.
# notemark/options/plaintext.py
"""Configuration options for plain text rendering.

This module defines options for rendering AST to plain text format.
"""

from dataclasses import dataclass, field

from notemark.constants import DEFAULT_PLAINTEXT_HEADING_MARKERS, DEFAULT_PLAINTEXT_LIST_ITEM_PREFIX
from notemark.options.base import BaseRendererOptions


@dataclass(frozen=True)
class PlainTextOptions(BaseRendererOptions):
    r"""Configuration options for plain text rendering.

    Inline formatting (bold, links, highlights...) is dropped. Block
    structure is kept readable: blocks are separated by blank lines, list
    entries get a bullet glyph, task entries get ``[x]``/``[ ]`` and quotes
    get ``> ``.

    Parameters
    ----------
    list_item_prefix : str, default "• "
        Prefix for bullet and ordered list entries.
    heading_markers : bool, default True
        Prefix headings with ``#`` characters matching their level.
        When False, headings render as bare text.

    Examples
    --------
    Basic plain text rendering:
        >>> from notemark.ast import Document, Paragraph, Text
        >>> from notemark.renderers.plaintext import PlainTextRenderer
        >>> doc = Document(children=[
        ...     Paragraph(content=[Text(content="Hello world")])
        ... ])
        >>> PlainTextRenderer(PlainTextOptions(list_item_prefix="- ")).render_to_string(doc)
        'Hello world'

    """

    list_item_prefix: str = field(
        default=DEFAULT_PLAINTEXT_LIST_ITEM_PREFIX,
        metadata={"help": "Prefix for list items", "type": str, "importance": "core"},
    )
    heading_markers: bool = field(
        default=DEFAULT_PLAINTEXT_HEADING_MARKERS,
        metadata={
            "help": "Prefix headings with '#' markers",
            "cli_name": "no-heading-markers",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
