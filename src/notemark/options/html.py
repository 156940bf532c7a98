#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering.

This module defines options for HTML output with sanitization controls for
the attribute values that come from note content.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from notemark.constants import (
    DEFAULT_HIGHLIGHT_COLOR,
    DEFAULT_HTML_BLOCK_DANGEROUS_LINKS,
    DEFAULT_HTML_CSS_STYLE,
    DEFAULT_HTML_DOCUMENT_TITLE,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_HTML_LINK_TARGET_BLANK,
    DEFAULT_HTML_SANITIZE_STYLE_VALUES,
    DEFAULT_HTML_STANDALONE,
    CssStyle,
)
from notemark.options.base import BaseRendererOptions


# src/notemark/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering AST to HTML format.

    Parameters
    ----------
    standalone : bool, default True
        Generate complete HTML document with <html>, <head>, <body> tags.
        If False, generates only the content fragment.
    css_style : {"embedded", "none"}, default "embedded"
        How to include CSS styles in a standalone document:
        - "embedded": Include the print-friendly <style> block in <head>
        - "none": No styling
    language : str, default "en"
        Document language code for the <html lang="..."> attribute.
    default_title : str, default "Exported Note"
        <title> of a standalone document whose AST carries no title.
    default_highlight_color : str, default "#ffff00"
        Background color of highlights without a color attribute.
    sanitize_style_values : bool, default True
        Validate highlight colors and text alignment before placing them
        in ``style`` attributes. Invalid values fall back to the default
        color or are dropped. Values are HTML-escaped either way.
    block_dangerous_links : bool, default True
        Replace ``javascript:`` and similar link targets with ``#``.
    link_target_blank : bool, default True
        Open links in a new tab (``target="_blank"`` with
        ``rel="noopener noreferrer"``).

    """

    standalone: bool = field(
        default=DEFAULT_HTML_STANDALONE,
        metadata={
            "help": "Generate complete HTML document (vs content fragment)",
            "cli_name": "no-standalone",
            "importance": "core",
        },
    )
    css_style: CssStyle = field(
        default=DEFAULT_HTML_CSS_STYLE,
        metadata={"help": "How to include CSS styles", "choices": ["embedded", "none"], "importance": "core"},
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Document language code (ISO 639-1) for HTML lang attribute", "importance": "advanced"},
    )
    default_title: str = field(
        default=DEFAULT_HTML_DOCUMENT_TITLE,
        metadata={"help": "Document <title> used when the note has no title", "importance": "advanced"},
    )
    default_highlight_color: str = field(
        default=DEFAULT_HIGHLIGHT_COLOR,
        metadata={"help": "Background color for highlights without a color", "importance": "advanced"},
    )
    sanitize_style_values: bool = field(
        default=DEFAULT_HTML_SANITIZE_STYLE_VALUES,
        metadata={
            "help": "Validate colors and alignment placed in style attributes",
            "cli_name": "no-sanitize-style-values",
            "importance": "security",
        },
    )
    block_dangerous_links: bool = field(
        default=DEFAULT_HTML_BLOCK_DANGEROUS_LINKS,
        metadata={
            "help": "Replace javascript: and similar link targets",
            "cli_name": "no-block-dangerous-links",
            "importance": "security",
        },
    )
    link_target_blank: bool = field(
        default=DEFAULT_HTML_LINK_TARGET_BLANK,
        metadata={
            "help": "Open links in a new tab",
            "cli_name": "no-link-target-blank",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate options.

        Raises
        ------
        ValueError
            If css_style is not a supported choice.

        """
        super().__post_init__()
        if self.css_style not in ("embedded", "none"):
            raise ValueError(f"css_style must be 'embedded' or 'none', got {self.css_style!r}")
