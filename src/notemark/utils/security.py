#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Security utilities for notemark renderers and exporters.

Note content is user-controlled. Anything that ends up inside an HTML
attribute, a code fence info string or a file name passes through one of
these functions first.

Functions
---------
- sanitize_language_identifier: Sanitize code fence language identifiers
- is_relative_url: Check whether a URL has no scheme
- is_url_scheme_dangerous: Detect javascript: and similar link targets
- sanitize_css_color: Validate a color placed in a style attribute
- sanitize_text_align: Validate a text-align value
- sanitize_export_filename: Build a safe file name from a note title
"""

import logging
import re
from typing import Optional
from urllib.parse import urlparse

from notemark.constants import (
    DANGEROUS_SCHEMES,
    DEFAULT_EXPORT_FILENAME,
    FILENAME_FORBIDDEN_CHARS_PATTERN,
    MAX_EXPORT_FILENAME_LENGTH,
    MAX_LANGUAGE_IDENTIFIER_LENGTH,
    SAFE_CSS_COLOR_PATTERN,
    SAFE_LANGUAGE_IDENTIFIER_PATTERN,
    SAFE_TEXT_ALIGN_VALUES,
)

logger = logging.getLogger(__name__)

_CSS_COLOR_RE = re.compile(SAFE_CSS_COLOR_PATTERN)
_FORBIDDEN_FILENAME_CHARS_RE = re.compile(FILENAME_FORBIDDEN_CHARS_PATTERN)
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_language_identifier(language: str) -> str:
    r"""Sanitize code fence language identifier to prevent markup injection.

    Parameters
    ----------
    language : str
        Raw language identifier string to sanitize

    Returns
    -------
    str
        Sanitized language identifier, or empty string if invalid

    Examples
    --------
    >>> sanitize_language_identifier("python")
    'python'
    >>> sanitize_language_identifier("c++")
    'c++'
    >>> sanitize_language_identifier("python\\nmalicious")
    ''
    >>> sanitize_language_identifier("python javascript")
    ''
    >>> sanitize_language_identifier("x" * 100)
    ''

    """
    if not language:
        return ""

    language = language.strip()

    if len(language) > MAX_LANGUAGE_IDENTIFIER_LENGTH:
        logger.warning(
            f"Language identifier exceeds maximum length ({MAX_LANGUAGE_IDENTIFIER_LENGTH}): {language[:50]}..."
        )
        return ""

    if not re.match(SAFE_LANGUAGE_IDENTIFIER_PATTERN, language):
        logger.warning(
            f"Blocked potentially dangerous language identifier containing invalid characters: {language[:50]}"
        )
        return ""

    return language


def is_relative_url(url: str) -> bool:
    """Check if a URL is a relative URL.

    Relative URLs do not have a scheme and typically start with #, /, ./, ../, or ?.

    Examples
    --------
    >>> is_relative_url("#section")
    True
    >>> is_relative_url("https://example.com")
    False

    """
    if not url or not url.strip():
        return True

    return url.strip().startswith(("#", "/", "./", "../", "?"))


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a dangerous scheme.

    Dangerous schemes include javascript:, vbscript:, data:text/html, and others
    that can be used for XSS attacks or malicious code execution.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL uses a dangerous scheme, False otherwise

    Examples
    --------
    >>> is_url_scheme_dangerous("https://example.com")
    False
    >>> is_url_scheme_dangerous("javascript:alert('xss')")
    True
    >>> is_url_scheme_dangerous("/relative/path")
    False

    """
    if not url or not url.strip():
        return False

    # Browsers ignore embedded control characters and whitespace in schemes
    url_lower = "".join(ch for ch in url.lower() if ch > " ")

    if is_relative_url(url_lower):
        return False

    for dangerous_scheme in DANGEROUS_SCHEMES:
        if url_lower.startswith(dangerous_scheme):
            return True

    try:
        scheme = urlparse(url_lower).scheme
    except ValueError:
        return True

    return scheme in ("javascript", "vbscript")


def sanitize_css_color(color: Optional[str], fallback: str) -> str:
    """Return ``color`` if it is a plain CSS color, otherwise ``fallback``.

    Accepts hex colors, named colors, ``rgb()``/``rgba()``/``hsl()``/``hsla()``
    and ``var(--name)``. Anything else (``;``, quotes, ``url(...)``,
    ``expression(...)``) is rejected because it could escape the declaration.

    Examples
    --------
    >>> sanitize_css_color("#ff0", "#ffff00")
    '#ff0'
    >>> sanitize_css_color("red; background: url(x)", "#ffff00")
    '#ffff00'

    """
    if not color:
        return fallback

    candidate = color.strip()
    if _CSS_COLOR_RE.match(candidate):
        return candidate

    logger.warning(f"Ignoring unsafe highlight color: {color[:50]!r}")
    return fallback


def sanitize_text_align(value: Optional[str]) -> Optional[str]:
    """Return ``value`` if it is a known text-align keyword, otherwise None."""
    if not value:
        return None
    candidate = value.strip().lower()
    if candidate in SAFE_TEXT_ALIGN_VALUES:
        return candidate
    logger.warning(f"Dropping unsupported text alignment: {value[:50]!r}")
    return None


def sanitize_export_filename(title: Optional[str]) -> str:
    """Turn a note title into a file name stem.

    Characters that are invalid on common file systems are removed,
    whitespace runs become underscores and the result is truncated.

    Examples
    --------
    >>> sanitize_export_filename("My Note: Draft?")
    'My_Note_Draft'
    >>> sanitize_export_filename("")
    'untitled'

    """
    if not title:
        return DEFAULT_EXPORT_FILENAME

    name = _FORBIDDEN_FILENAME_CHARS_RE.sub("", title)
    name = _WHITESPACE_RE.sub("_", name)
    name = name[:MAX_EXPORT_FILENAME_LENGTH]
    # Reserved path names and control characters
    name = "".join(ch for ch in name if ch >= " ")
    if name in ("", ".", ".."):
        return DEFAULT_EXPORT_FILENAME
    return name


__all__ = [
    "sanitize_language_identifier",
    "is_relative_url",
    "is_url_scheme_dangerous",
    "sanitize_css_color",
    "sanitize_text_align",
    "sanitize_export_filename",
]
