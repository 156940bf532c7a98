#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/search.py
"""In-memory note search.

Matching is a case-insensitive substring test against the note title and
against the compact JSON serialization of the note's document tree, so a
query also hits node types, mark names and attribute values stored in the
tree. Title matches rank first; ties are ordered newest first.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from notemark.constants import DEFAULT_SEARCH_LIMIT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Note:
    """A stored note as seen by search."""

    id: str
    title: str
    content: Any
    created_at: datetime
    author_email: Optional[str] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)


def _serialize_content(content: Any) -> str:
    """Return the compact JSON text of a mapping document, or ``""``."""
    if not isinstance(content, Mapping):
        return ""
    try:
        return json.dumps(content, separators=(",", ":"), ensure_ascii=False, default=str)
    except (TypeError, ValueError) as e:
        logger.debug(f"Could not serialize note content for search: {e}")
        return ""


def search_notes(notes: Iterable[Note], query: Optional[str], limit: int = DEFAULT_SEARCH_LIMIT) -> list[Note]:
    """Find notes whose title or content contains ``query``.

    Parameters
    ----------
    notes : iterable of Note
        Notes to search
    query : str or None
        Search text. Surrounding whitespace is ignored; an empty query
        returns no results.
    limit : int, default 20
        Maximum number of results

    Returns
    -------
    list of Note
        Matches, title matches first, each group newest first

    Examples
    --------
        >>> from datetime import datetime
        >>> notes = [Note(id="1", title="Groceries", content={}, created_at=datetime(2025, 1, 1))]
        >>> [n.id for n in search_notes(notes, "grocer")]
        ['1']

    """
    if not query or not query.strip():
        return []

    needle = query.strip().lower()

    title_hits: list[Note] = []
    content_hits: list[Note] = []
    for note in notes:
        if needle in (note.title or "").lower():
            title_hits.append(note)
        elif needle in _serialize_content(note.content).lower():
            content_hits.append(note)

    title_hits.sort(key=lambda n: n.created_at, reverse=True)
    content_hits.sort(key=lambda n: n.created_at, reverse=True)

    results = (title_hits + content_hits)[: max(limit, 0)]
    logger.debug(f"Search for {needle!r} matched {len(title_hits) + len(content_hits)} note(s)")
    return results


__all__ = ["Note", "search_notes"]
