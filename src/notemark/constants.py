#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for notemark.

This module centralizes the hardcoded values and default configuration
constants used across the library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Document Model - Node and mark type names of the editor JSON
3. Rendering Defaults - Plain text, Markdown and HTML settings
4. Security Constants - Sanitization patterns and allow-lists
5. Export, Search and Sharing - Defaults for the note application helpers
"""

from __future__ import annotations

from datetime import timedelta
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

EmphasisSymbol = Literal["*", "_"]
BulletSymbol = Literal["-", "*", "+"]
CssStyle = Literal["embedded", "none"]
ExportFormat = Literal["markdown", "html", "text", "pdf"]

# =============================================================================
# Document Model
# =============================================================================

NODE_DOC = "doc"
NODE_PARAGRAPH = "paragraph"
NODE_HEADING = "heading"
NODE_BULLET_LIST = "bulletList"
NODE_ORDERED_LIST = "orderedList"
NODE_LIST_ITEM = "listItem"
NODE_TASK_LIST = "taskList"
NODE_TASK_ITEM = "taskItem"
NODE_BLOCKQUOTE = "blockquote"
NODE_CODE_BLOCK = "codeBlock"
NODE_HORIZONTAL_RULE = "horizontalRule"
NODE_TEXT = "text"

MARK_BOLD = "bold"
MARK_ITALIC = "italic"
MARK_STRIKE = "strike"
MARK_CODE = "code"
MARK_LINK = "link"
MARK_HIGHLIGHT = "highlight"
MARK_UNDERLINE = "underline"
MARK_SUBSCRIPT = "subscript"
MARK_SUPERSCRIPT = "superscript"

DEFAULT_HEADING_LEVEL = 1

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_TIPTAP_STRICT_MODE = False
DEFAULT_MAX_NESTING_DEPTH = 100

# =============================================================================
# Rendering Defaults
# =============================================================================

# Plain text
DEFAULT_PLAINTEXT_LIST_ITEM_PREFIX = "• "
DEFAULT_PLAINTEXT_HEADING_MARKERS = True

# Markdown
DEFAULT_EMPHASIS_SYMBOL: EmphasisSymbol = "_"
DEFAULT_BULLET_SYMBOL: BulletSymbol = "-"
DEFAULT_LIST_INDENT_WIDTH = 2
DEFAULT_CODE_FENCE = "```"

# HTML
DEFAULT_HTML_STANDALONE = True
DEFAULT_HTML_CSS_STYLE: CssStyle = "embedded"
DEFAULT_HTML_LANGUAGE = "en"
DEFAULT_HTML_DOCUMENT_TITLE = "Exported Note"
DEFAULT_HIGHLIGHT_COLOR = "#ffff00"
DEFAULT_HTML_SANITIZE_STYLE_VALUES = True
DEFAULT_HTML_BLOCK_DANGEROUS_LINKS = True
DEFAULT_HTML_LINK_TARGET_BLANK = True
DANGEROUS_LINK_REPLACEMENT = "#"

# =============================================================================
# Security Constants
# =============================================================================

SAFE_LANGUAGE_IDENTIFIER_PATTERN = r"^[a-zA-Z0-9_+#.\-]+$"
MAX_LANGUAGE_IDENTIFIER_LENGTH = 50

# Hex, named, functional rgb/hsl and custom-property colors
SAFE_CSS_COLOR_PATTERN = (
    r"^(?:#[0-9a-fA-F]{3,8}"
    r"|[a-zA-Z]{1,30}"
    r"|(?:rgb|rgba|hsl|hsla)\(\s*[0-9.,%\s/+\-a-z]{1,80}\)"
    r"|var\(--[a-zA-Z0-9_\-]{1,64}\))$"
)
SAFE_TEXT_ALIGN_VALUES = frozenset({"left", "center", "right", "justify", "start", "end"})

DANGEROUS_SCHEMES = frozenset(
    {
        "javascript:",
        "vbscript:",
        "data:text/html",
        "data:text/javascript",
        "data:application/javascript",
        "data:application/x-javascript",
    }
)

# =============================================================================
# Export, Search and Sharing
# =============================================================================

EXPORT_FILE_EXTENSIONS: dict[str, str] = {
    "markdown": ".md",
    "html": ".html",
    "text": ".txt",
    "pdf": ".html",
}
FILENAME_FORBIDDEN_CHARS_PATTERN = r'[<>:"/\\|?*]'
MAX_EXPORT_FILENAME_LENGTH = 100
DEFAULT_EXPORT_FILENAME = "untitled"

DEFAULT_SEARCH_LIMIT = 20

SHARE_EXPIRY_DELTAS: dict[str, timedelta] = {
    "1h": timedelta(hours=1),
    "24h": timedelta(hours=24),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}
SHARE_TOKEN_BYTES = 24

# =============================================================================
# CLI
# =============================================================================

CONFIG_ENV_VAR = "NOTEMARK_CONFIG"
CONFIG_FILENAMES = [".notemark.toml", ".notemark.yaml", ".notemark.yml", ".notemark.json"]
