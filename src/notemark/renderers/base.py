#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that all AST renderers inherit
from. The BaseRenderer provides a consistent interface for converting the
notemark AST into the supported output formats.
"""

from __future__ import annotations

from abc import ABC
from pathlib import Path
from typing import IO, Union

from notemark.ast import Document
from notemark.ast.nodes import Node
from notemark.exceptions import InvalidOptionsError, OutputWriteError
from notemark.options.base import BaseRendererOptions
from notemark.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Subclasses implement ``render_to_string``; ``render`` writes that string
    to a path or stream.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:
        >>> from notemark.renderers.base import BaseRenderer
        >>>
        >>> class WordCountRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return str(len(doc.children))

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write the result to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If output cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If output cannot be written
        TypeError
            If output type is not supported

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("# Hello", buffer)
            >>> print(buffer.getvalue())
            # Hello

        """
        try:
            write_content(text, output)
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e


class InlineContentMixin:
    """Mixin providing the content capture pattern for text-based renderers.

    ``_render_inline_content()`` renders a list of nodes to a string by
    temporarily swapping out the accumulated output. Every container rule of
    the note formats needs the rendered text of its children before it can
    wrap, prefix or trim it, so the renderers use this for block children as
    well as inline ones.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    Examples
    --------
        >>> class MyRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
        ...     def visit_emphasis(self, node):
        ...         content = self._render_inline_content(node.content)
        ...         self._output.append(f"*{content}*")

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of nodes to text.

        Parameters
        ----------
        content : list of Node
            Nodes to render

        Returns
        -------
        str
            Rendered content as a string

        """
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
