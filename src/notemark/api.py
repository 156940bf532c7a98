#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/api.py
"""Public conversion API for note documents.

Each function accepts the editor JSON tree (as a mapping, raw JSON bytes, a
file path or a stream) or an already parsed :class:`~notemark.ast.Document`,
and returns the rendered text. Conversion never raises for malformed trees
unless the parser runs in strict mode; missing pieces contribute nothing.

Every call builds its own parser and renderer, so concurrent calls share no
state.
"""

from __future__ import annotations

import logging
import webbrowser
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from notemark.ast import Document
from notemark.constants import EXPORT_FILE_EXTENSIONS, ExportFormat
from notemark.exceptions import ExportError, FormatError, InvalidOptionsError, OutputWriteError, ValidationError
from notemark.options.base import BaseParserOptions, BaseRendererOptions
from notemark.options.html import HtmlRendererOptions
from notemark.options.markdown import MarkdownRendererOptions
from notemark.options.plaintext import PlainTextOptions
from notemark.options.tiptap import TiptapParserOptions
from notemark.parsers.tiptap import TiptapParser
from notemark.renderers.html import HtmlRenderer
from notemark.renderers.markdown import MarkdownRenderer
from notemark.renderers.plaintext import PlainTextRenderer
from notemark.utils.io_utils import NoteSource
from notemark.utils.security import sanitize_export_filename

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", BaseParserOptions, BaseRendererOptions)

DocumentInput = Union[Document, NoteSource]


def _split_kwargs_for_parser_and_renderer(
    renderer_class: type[BaseRendererOptions], kwargs: dict[str, Any]
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split kwargs between parser and renderer based on their field names.

    Returns
    -------
    tuple[dict, dict]
        (parser_kwargs, renderer_kwargs)

    """
    parser_fields = {f.name for f in fields(TiptapParserOptions)}
    renderer_fields = {f.name for f in fields(renderer_class)}

    parser_kwargs: dict[str, Any] = {}
    renderer_kwargs: dict[str, Any] = {}
    unmatched = []

    for k, v in kwargs.items():
        if k in parser_fields:
            parser_kwargs[k] = v
        elif k in renderer_fields:
            renderer_kwargs[k] = v
        else:
            unmatched.append(k)

    if unmatched:
        logger.debug(f"Kwargs don't match parser or renderer fields: {unmatched}")

    return parser_kwargs, renderer_kwargs


def _merge_options(options: Optional[OptionsT], options_class: type[OptionsT], overrides: dict[str, Any]) -> OptionsT:
    """Apply keyword overrides on top of an options object (or the defaults)."""
    if options is not None and not isinstance(options, options_class):
        raise InvalidOptionsError(
            converter_name="notemark.api",
            expected_type=options_class,
            received_type=type(options),
        )
    base = options if options is not None else options_class()
    if not overrides:
        return base
    try:
        return base.create_updated(**overrides)
    except (TypeError, ValueError) as e:
        raise ValidationError(str(e), parameter_name="options", parameter_value=overrides, original_error=e) from e


def to_ast(
    document: DocumentInput,
    *,
    title: Optional[str] = None,
    parser_options: Optional[TiptapParserOptions] = None,
    **kwargs: Any,
) -> Document:
    """Parse a note document into the AST.

    Parameters
    ----------
    document : Document, Mapping, bytes, str, Path, IO or None
        The editor JSON tree or an already parsed Document
    title : str, optional
        Note title stored in ``Document.metadata["title"]``. An existing
        Document is copied rather than modified.
    parser_options : TiptapParserOptions, optional
        Parser configuration
    kwargs : Any
        Individual parser option overrides (e.g. ``strict_mode=True``)

    Returns
    -------
    Document
        Parsed document

    Examples
    --------
        >>> doc = to_ast({"type": "doc", "content": []}, title="Empty")
        >>> doc.title
        'Empty'

    """
    if isinstance(document, Document):
        doc = document
    else:
        options = _merge_options(parser_options, TiptapParserOptions, kwargs)
        doc = TiptapParser(options).parse(document)

    if title:
        doc = replace(doc, metadata={**doc.metadata, "title": title})
    return doc


def to_plain_text(
    document: DocumentInput,
    *,
    parser_options: Optional[TiptapParserOptions] = None,
    renderer_options: Optional[PlainTextOptions] = None,
    **kwargs: Any,
) -> str:
    """Convert a note document to plain text.

    Inline formatting is dropped. Blocks are separated by blank lines, list
    entries start with ``• `` and task entries with ``[x]``/``[ ]``.
    Surrounding whitespace is removed; an empty document yields ``""``.

    Examples
    --------
        >>> to_plain_text({"type": "doc", "content": [
        ...     {"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]},
        ... ]})
        'Hello'

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(PlainTextOptions, kwargs)
    doc = to_ast(document, parser_options=parser_options, **parser_kwargs)
    options = _merge_options(renderer_options, PlainTextOptions, renderer_kwargs)
    return PlainTextRenderer(options).render_to_string(doc)


def to_markdown(
    document: DocumentInput,
    title: Optional[str] = None,
    *,
    parser_options: Optional[TiptapParserOptions] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Convert a note document to Markdown.

    Parameters
    ----------
    document : Document, Mapping, bytes, str, Path, IO or None
        The editor JSON tree or an already parsed Document
    title : str, optional
        Emitted as a ``# title`` heading before the body (not escaped)
    parser_options : TiptapParserOptions, optional
        Parser configuration
    renderer_options : MarkdownRendererOptions, optional
        Markdown configuration
    kwargs : Any
        Individual option overrides, routed to the parser or renderer by
        field name

    Returns
    -------
    str
        Markdown text with surrounding whitespace removed

    Examples
    --------
        >>> to_markdown({"type": "doc", "content": [
        ...     {"type": "paragraph", "content": [{"type": "text", "text": "Hello, World!"}]},
        ... ]}, title="Test")
        '# Test\\n\\nHello, World!'

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(MarkdownRendererOptions, kwargs)
    doc = to_ast(document, title=title, parser_options=parser_options, **parser_kwargs)
    options = _merge_options(renderer_options, MarkdownRendererOptions, renderer_kwargs)
    return MarkdownRenderer(options).render_to_string(doc)


def to_html(
    document: DocumentInput,
    title: Optional[str] = None,
    include_styles: bool = True,
    *,
    parser_options: Optional[TiptapParserOptions] = None,
    renderer_options: Optional[HtmlRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Convert a note document to HTML.

    Parameters
    ----------
    document : Document, Mapping, bytes, str, Path, IO or None
        The editor JSON tree or an already parsed Document
    title : str, optional
        Rendered as an escaped ``<h1>`` before the body and, for complete
        documents, as the ``<title>``
    include_styles : bool, default True
        Return a complete document with the embedded stylesheet. When False,
        only the HTML fragment is returned.
    parser_options : TiptapParserOptions, optional
        Parser configuration
    renderer_options : HtmlRendererOptions, optional
        HTML configuration. ``include_styles`` takes precedence over its
        ``standalone`` field.
    kwargs : Any
        Individual option overrides

    Returns
    -------
    str
        HTML fragment or complete document

    Examples
    --------
        >>> to_html({"type": "doc", "content": [
        ...     {"type": "paragraph", "content": [{"type": "text", "text": "Hello, World!"}]},
        ... ]}, title="Test", include_styles=False)
        '<h1>Test</h1>\\n<p>Hello, World!</p>'

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(HtmlRendererOptions, kwargs)
    renderer_kwargs["standalone"] = include_styles
    doc = to_ast(document, title=title, parser_options=parser_options, **parser_kwargs)
    options = _merge_options(renderer_options, HtmlRendererOptions, renderer_kwargs)
    return HtmlRenderer(options).render_to_string(doc)


def export_note(
    document: DocumentInput,
    title: str,
    format: ExportFormat,
    *,
    include_styles: bool = True,
    output_dir: Union[str, Path] = ".",
    renderer_options: Optional[Union[PlainTextOptions, MarkdownRendererOptions, HtmlRendererOptions]] = None,
) -> Path:
    """Export a note to a file named after its title.

    Parameters
    ----------
    document : Document, Mapping, bytes, str, Path, IO or None
        The editor JSON tree or an already parsed Document
    title : str
        Note title, used for the heading and the file name
    format : {"markdown", "html", "text", "pdf"}
        Export format. ``pdf`` writes the print-ready HTML document and opens
        it in the system browser, whose print dialog produces the PDF.
    include_styles : bool, default True
        Embed the stylesheet in HTML and PDF exports
    output_dir : str or Path, default "."
        Directory to write into; created if missing
    renderer_options : PlainTextOptions, MarkdownRendererOptions or HtmlRendererOptions, optional
        Options for the renderer of ``format``; HTML options apply to
        ``pdf`` as well

    Returns
    -------
    Path
        The written file

    Raises
    ------
    FormatError
        If the format is not supported
    OutputWriteError
        If the file cannot be written
    ExportError
        If no browser could be opened for a PDF export
    InvalidOptionsError
        If ``renderer_options`` does not match the format

    """
    if format not in EXPORT_FILE_EXTENSIONS:
        raise FormatError(format_type=str(format), supported_formats=list(EXPORT_FILE_EXTENSIONS))

    if format == "markdown":
        content = to_markdown(document, title, renderer_options=renderer_options)
    elif format == "text":
        body = to_plain_text(document, renderer_options=renderer_options)
        content = f"{title}\n\n{body}".strip() if title else body
    else:
        content = to_html(document, title, include_styles, renderer_options=renderer_options)

    target = Path(output_dir) / (sanitize_export_filename(title) + EXPORT_FILE_EXTENSIONS[format])
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(target), original_error=e) from e

    logger.info(f"Exported note to {target}")

    if format == "pdf":
        if not webbrowser.open(target.resolve().as_uri()):
            raise ExportError("Failed to open print window. No browser is available to print the note.")
        logger.info("Opened print view in the system browser")

    return target


__all__ = ["to_ast", "to_plain_text", "to_markdown", "to_html", "export_note"]
