"""notemark - render rich-text note documents as plain text, Markdown and HTML.

notemark reads the JSON document tree produced by TipTap/ProseMirror style
editors and renders it in three target formats. Input is parsed leniently
into a small AST, so malformed or partial documents still produce output.

Key Features
------------
- Plain text rendering for previews and search snippets
- Markdown rendering with nested lists, task lists and inline marks
- Standalone HTML pages with an embedded stylesheet, or bare fragments
- File export named after the note title, including a print-to-PDF flow
- Share links with revocation, expiry and view counting
- Case-insensitive note search over titles and document content

Examples
--------
Basic usage:

    >>> from notemark import to_markdown
    >>> doc = {"type": "doc", "content": [
    ...     {"type": "paragraph", "content": [
    ...         {"type": "text", "text": "hi", "marks": [{"type": "bold"}]}
    ...     ]}
    ... ]}
    >>> to_markdown(doc)
    '**hi**'

Working with the AST directly:

    >>> from notemark import to_ast
    >>> from notemark.renderers import HtmlRenderer
    >>> html = HtmlRenderer().render_to_string(to_ast(doc, title="Notes"))

See Also
--------
notemark.ast : AST node definitions
notemark.cli : command-line interface

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "notemark requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from notemark.api import export_note, to_ast, to_html, to_markdown, to_plain_text
from notemark.exceptions import (
    ExportError,
    FileError,
    FormatError,
    NotemarkError,
    ParsingError,
    RenderingError,
    ShareError,
    ShareExpiredError,
    ShareNotFoundError,
    ShareRevokedError,
    ValidationError,
)
from notemark.options import (
    HtmlRendererOptions,
    MarkdownRendererOptions,
    PlainTextOptions,
    TiptapParserOptions,
)
from notemark.search import Note, search_notes
from notemark.sharing import (
    SharedNote,
    check_share_access,
    create_share,
    render_shared_note,
    update_share,
)

__all__ = [
    "__version__",
    "to_ast",
    "to_plain_text",
    "to_markdown",
    "to_html",
    "export_note",
    # Options
    "TiptapParserOptions",
    "PlainTextOptions",
    "MarkdownRendererOptions",
    "HtmlRendererOptions",
    # Search and sharing
    "Note",
    "search_notes",
    "SharedNote",
    "create_share",
    "update_share",
    "check_share_access",
    "render_shared_note",
    # Exceptions
    "NotemarkError",
    "ValidationError",
    "FileError",
    "FormatError",
    "ParsingError",
    "RenderingError",
    "ExportError",
    "ShareError",
    "ShareNotFoundError",
    "ShareRevokedError",
    "ShareExpiredError",
]
