#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Conversion and output handling for the notemark CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from notemark.api import export_note, to_ast, to_html, to_markdown, to_plain_text
from notemark.ast import Document
from notemark.exceptions import ParsingError
from notemark.options.base import CloneFrozenMixin
from notemark.utils.io_utils import write_content

logger = logging.getLogger(__name__)

RICH_CODE_THEME = "monokai"

# Config section holding the renderer options for each --to format
RENDERER_SECTIONS = {"markdown": "markdown", "html": "html", "text": "plaintext"}


def load_input_document(input_arg: str, options: Dict[str, CloneFrozenMixin]) -> Document:
    """Parse the CLI input (a JSON file path or ``-`` for stdin) into a Document.

    Raises
    ------
    ParsingError
        If the input is not valid JSON
    FileError
        If the input file cannot be read

    """
    parser_options = options.get("tiptap")
    if input_arg == "-":
        raw = sys.stdin.read()
        try:
            data = json.loads(raw) if raw.strip() else None
        except json.JSONDecodeError as e:
            raise ParsingError(f"Invalid JSON on stdin: {e}", parsing_stage="json_parsing", original_error=e) from e
        return to_ast(data, parser_options=parser_options)
    return to_ast(Path(input_arg), parser_options=parser_options)


def render_document(doc: Document, args: argparse.Namespace, options: Dict[str, CloneFrozenMixin]) -> str:
    """Render a parsed document in the format selected by ``--to``."""
    title: Optional[str] = args.title
    if args.to == "markdown":
        return to_markdown(doc, title, renderer_options=options.get("markdown"))
    if args.to == "html":
        return to_html(doc, title, include_styles=not args.no_styles, renderer_options=options.get("html"))
    return to_plain_text(doc, renderer_options=options.get("plaintext"))


def default_export_title(args: argparse.Namespace) -> str:
    """Return the export title: ``--title``, else the input file stem."""
    if args.title:
        return args.title
    if args.input != "-":
        return Path(args.input).stem
    return ""


def export_document(doc: Document, args: argparse.Namespace, options: Dict[str, CloneFrozenMixin]) -> Path:
    """Write the document into ``--export-dir`` with a title-based file name."""
    return export_note(
        doc,
        default_export_title(args),
        args.to,
        include_styles=not args.no_styles,
        output_dir=args.export_dir,
        renderer_options=options.get(RENDERER_SECTIONS[args.to]),
    )


def print_rich_output(content: str, target_format: str) -> None:
    """Print rendered output to the terminal with Rich formatting."""
    from rich.console import Console
    from rich.markdown import Markdown
    from rich.syntax import Syntax

    console = Console()
    if target_format == "markdown":
        console.print(Markdown(content))
    elif target_format == "html":
        console.print(Syntax(content, "html", theme=RICH_CODE_THEME, word_wrap=True))
    else:
        console.print(content, markup=False, highlight=False)


def emit_output(content: str, args: argparse.Namespace) -> None:
    """Send rendered output to ``--out``, a Rich console, or stdout."""
    if args.out:
        write_content(content, args.out)
        logger.info(f"Wrote {args.to} output to {args.out}")
    elif args.rich:
        print_rich_output(content, args.to)
    else:
        print(content)


def process_input(args: argparse.Namespace, options: Dict[str, Any]) -> None:
    """Run one conversion as described by the parsed arguments."""
    doc = load_input_document(args.input, options)

    if args.export_dir:
        path = export_document(doc, args, options)
        print(path)
        return

    emit_output(render_document(doc, args, options), args)
