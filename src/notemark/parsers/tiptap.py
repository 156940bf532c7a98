#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/parsers/tiptap.py
"""Editor JSON to AST converter.

This module converts the JSON tree produced by a ProseMirror/TipTap style
rich-text editor into the notemark AST. The editor format is loosely shaped:
optional fields may be missing and stored documents may predate node kinds
added later. The parser is therefore lenient by default and only rejects
malformed shapes when ``strict_mode`` is enabled.

Marks on a text node become nested inline nodes. They are applied in array
order, so the first mark ends up innermost and the last mark outermost::

    {"type": "text", "text": "hi", "marks": [{"type": "bold"}, {"type": "italic"}]}

parses to ``Emphasis(content=[Strong(content=[Text("hi")])])``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from notemark.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Highlight,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    TaskItem,
    TaskList,
    Text,
    ThematicBreak,
    Underline,
    UnknownNode,
)
from notemark.constants import (
    DEFAULT_HEADING_LEVEL,
    MARK_BOLD,
    MARK_CODE,
    MARK_HIGHLIGHT,
    MARK_ITALIC,
    MARK_LINK,
    MARK_STRIKE,
    MARK_SUBSCRIPT,
    MARK_SUPERSCRIPT,
    MARK_UNDERLINE,
    NODE_BLOCKQUOTE,
    NODE_BULLET_LIST,
    NODE_CODE_BLOCK,
    NODE_DOC,
    NODE_HEADING,
    NODE_HORIZONTAL_RULE,
    NODE_LIST_ITEM,
    NODE_ORDERED_LIST,
    NODE_PARAGRAPH,
    NODE_TASK_ITEM,
    NODE_TASK_LIST,
    NODE_TEXT,
)
from notemark.exceptions import FileError, FileNotFoundError, ParsingError, ValidationError
from notemark.options.tiptap import TiptapParserOptions
from notemark.parsers.base import BaseParser
from notemark.utils.io_utils import NoteSource, load_note_json

logger = logging.getLogger(__name__)

_SIMPLE_MARKS: dict[str, Callable[[list[Node]], Node]] = {
    MARK_BOLD: lambda content: Strong(content=content),
    MARK_ITALIC: lambda content: Emphasis(content=content),
    MARK_STRIKE: lambda content: Strikethrough(content=content),
    MARK_CODE: lambda content: Code(content=content),
    MARK_UNDERLINE: lambda content: Underline(content=content),
    MARK_SUBSCRIPT: lambda content: Subscript(content=content),
    MARK_SUPERSCRIPT: lambda content: Superscript(content=content),
}


class TiptapParser(BaseParser):
    """Convert editor JSON trees to Document objects.

    Parameters
    ----------
    options : TiptapParserOptions or None
        Parser options

    Examples
    --------
    Parse an already decoded tree:
        >>> parser = TiptapParser()
        >>> doc = parser.parse({
        ...     "type": "doc",
        ...     "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Hi"}]}],
        ... })
        >>> doc.children[0].content[0].content
        'Hi'

    Parse a JSON file:
        >>> doc = parser.parse("note.json")

    """

    def __init__(self, options: TiptapParserOptions | None = None):
        """Initialize the editor JSON parser."""
        BaseParser._validate_options_type(options, TiptapParserOptions, "tiptap")
        options = options or TiptapParserOptions()
        super().__init__(options)
        self.options: TiptapParserOptions = options

    def parse(self, input_data: NoteSource) -> Document:
        """Parse editor JSON into a Document.

        Parameters
        ----------
        input_data : Mapping, bytes, str, Path, IO or None
            The decoded tree, raw JSON bytes, a JSON file path or a stream.
            ``None`` yields an empty document.

        Returns
        -------
        Document
            AST Document node. The input mapping is not modified.

        Raises
        ------
        ParsingError
            If the input is not valid JSON, or if strict mode is enabled and
            the tree is malformed
        FileNotFoundError
            If a file path does not exist
        ValidationError
            If the input type is not supported

        """
        try:
            data = load_note_json(input_data)
        except json.JSONDecodeError as e:
            raise ParsingError(f"Invalid JSON in note document: {e}", parsing_stage="json_parsing", original_error=e) from e
        except UnicodeDecodeError as e:
            raise ParsingError(
                f"Note document is not valid UTF-8: {e}", parsing_stage="json_parsing", original_error=e
            ) from e
        except OSError as e:
            path = str(input_data)
            if isinstance(input_data, (str, Path)) and not Path(input_data).exists():
                raise FileNotFoundError(path, original_error=e) from e
            raise FileError(f"Could not read note document: {e}", file_path=path, original_error=e) from e
        except TypeError as e:
            raise ValidationError(str(e), parameter_name="input_data", parameter_value=input_data, original_error=e) from e

        return self.parse_tree(data)

    def parse_tree(self, data: Any) -> Document:
        """Convert a decoded JSON value into a Document.

        A ``doc`` root (or one without a ``type``) contributes its children.
        Any other node type is parsed as a single node and becomes the only
        child of the document, so a root heading keeps its heading markup.
        A value that is not a mapping, or a ``doc`` root without a
        ``content`` list, yields an empty document in lenient mode.
        """
        if not isinstance(data, Mapping):
            if data is not None:
                self._malformed(f"Root node must be an object, got {type(data).__name__}")
            return Document()

        root_type = data.get("type")
        if root_type is not None and root_type != NODE_DOC:
            node = self._parse_node(data, depth=0)
            return Document(children=[node] if node is not None else [])

        content = data.get("content")
        if content is None:
            return Document()
        if not isinstance(content, list):
            self._malformed(f"Root 'content' must be a list, got {type(content).__name__}")
            return Document()

        return Document(children=self._parse_children(content, depth=1))

    # ------------------------------------------------------------------
    # Tree walking
    # ------------------------------------------------------------------

    def _malformed(self, message: str) -> None:
        if self.options.strict_mode:
            raise ParsingError(message, parsing_stage="tree_validation")
        logger.debug(message)

    def _parse_children(self, content: list[Any], depth: int) -> list[Node]:
        if depth > self.options.max_nesting_depth:
            message = f"Nesting depth exceeds maximum ({self.options.max_nesting_depth}); dropping deeper content"
            if self.options.strict_mode:
                raise ParsingError(message, parsing_stage="tree_validation")
            logger.warning(message)
            return []

        children: list[Node] = []
        for child in content:
            if not isinstance(child, Mapping):
                self._malformed(f"Skipping non-object child node of type {type(child).__name__}")
                continue
            node = self._parse_node(child, depth)
            if node is not None:
                children.append(node)
        return children

    def _get_attrs(self, node: Mapping[str, Any]) -> Mapping[str, Any]:
        attrs = node.get("attrs")
        if attrs is None:
            return {}
        if not isinstance(attrs, Mapping):
            self._malformed(f"Ignoring non-object 'attrs' on {node.get('type')!r} node")
            return {}
        return attrs

    def _parse_node(self, node: Mapping[str, Any], depth: int) -> Optional[Node]:
        node_type = node.get("type")

        if node_type == NODE_TEXT:
            return self._parse_text(node)

        # Void node, rendered even without a content list
        if node_type == NODE_HORIZONTAL_RULE:
            return ThematicBreak()

        content = node.get("content")
        if not isinstance(content, list):
            if content is not None:
                self._malformed(f"Ignoring non-list 'content' on {node_type!r} node")
            return None

        attrs = self._get_attrs(node)
        children = self._parse_children(content, depth + 1)

        if node_type == NODE_PARAGRAPH:
            return Paragraph(content=children, text_align=self._parse_text_align(attrs))
        if node_type == NODE_HEADING:
            return Heading(
                level=self._parse_heading_level(attrs.get("level")),
                content=children,
                text_align=self._parse_text_align(attrs),
            )
        if node_type == NODE_BULLET_LIST:
            return List(ordered=False, items=children)
        if node_type == NODE_ORDERED_LIST:
            return List(ordered=True, items=children)
        if node_type == NODE_LIST_ITEM:
            return ListItem(children=children)
        if node_type == NODE_TASK_LIST:
            return TaskList(items=children)
        if node_type == NODE_TASK_ITEM:
            return TaskItem(checked=bool(attrs.get("checked")), children=children)
        if node_type == NODE_BLOCKQUOTE:
            return BlockQuote(children=children)
        if node_type == NODE_CODE_BLOCK:
            language = attrs.get("language")
            return CodeBlock(content=children, language=str(language) if language else None)

        logger.debug(f"Unknown node type {node_type!r}; keeping its children")
        return UnknownNode(node_type=str(node_type) if node_type is not None else "", children=children)

    def _parse_text(self, node: Mapping[str, Any]) -> Node:
        text = node.get("text")
        if text is None:
            text = ""
        elif not isinstance(text, str):
            self._malformed(f"Converting non-string text of type {type(text).__name__}")
            text = str(text)

        result: Node = Text(content=text)

        marks = node.get("marks")
        if marks is None:
            return result
        if not isinstance(marks, list):
            self._malformed("Ignoring non-list 'marks' on text node")
            return result

        for mark in marks:
            if not isinstance(mark, Mapping):
                self._malformed(f"Skipping non-object mark of type {type(mark).__name__}")
                continue
            result = self._apply_mark(result, mark)
        return result

    def _apply_mark(self, inner: Node, mark: Mapping[str, Any]) -> Node:
        mark_type = mark.get("type")

        factory = _SIMPLE_MARKS.get(mark_type) if isinstance(mark_type, str) else None
        if factory is not None:
            return factory([inner])

        if mark_type == MARK_LINK:
            href = self._get_attrs(mark).get("href")
            return Link(url=str(href) if href else "", content=[inner])
        if mark_type == MARK_HIGHLIGHT:
            color = self._get_attrs(mark).get("color")
            return Highlight(content=[inner], color=str(color) if color else None)

        logger.debug(f"Ignoring unknown mark type {mark_type!r}")
        return inner

    def _parse_heading_level(self, level: Any) -> int:
        if not level:
            return DEFAULT_HEADING_LEVEL
        if isinstance(level, str) and level.isdigit():
            level = int(level)
        if isinstance(level, bool) or not isinstance(level, int) or level < 1:
            self._malformed(f"Invalid heading level {level!r}; using {DEFAULT_HEADING_LEVEL}")
            return DEFAULT_HEADING_LEVEL
        return level

    @staticmethod
    def _parse_text_align(attrs: Mapping[str, Any]) -> Optional[str]:
        align = attrs.get("textAlign")
        return str(align) if align else None
