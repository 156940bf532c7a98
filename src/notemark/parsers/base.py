#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that note parsers inherit from.
A parser turns some input representation into the notemark AST.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from notemark.ast import Document
from notemark.exceptions import InvalidOptionsError
from notemark.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:
        >>> from notemark.parsers.base import BaseParser
        >>> from notemark.ast import Document
        >>>
        >>> class EmptyParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return Document(children=[])

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Any) -> Document:
        """Parse the input into an AST.

        Parameters
        ----------
        input_data : Any
            The input document to parse

        Returns
        -------
        Document
            AST Document node representing the parsed document structure

        Raises
        ------
        ParsingError
            If parsing fails

        """
        raise NotImplementedError
