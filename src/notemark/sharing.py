#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/sharing.py
"""Public share links for notes.

A share gives read access to one note through an unguessable token. It can
be revoked (``is_public=False``) and can expire. Persistence is left to the
caller; these helpers only hold the rules for creating, updating and
checking shares.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from notemark.api import to_html
from notemark.ast import Document
from notemark.constants import SHARE_EXPIRY_DELTAS, SHARE_TOKEN_BYTES
from notemark.exceptions import ShareExpiredError, ShareNotFoundError, ShareRevokedError
from notemark.options.base import UNSET

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def generate_share_token() -> str:
    """Return a new URL-safe share token."""
    return secrets.token_urlsafe(SHARE_TOKEN_BYTES)


@dataclass
class SharedNote:
    """Share settings and counters for one note.

    Parameters
    ----------
    note_id : str
        Identifier of the shared note
    token : str
        URL-safe token identifying the share
    is_public : bool, default True
        False once the share is revoked
    include_css : bool, default True
        Whether viewers get the styled page
    expires_at : datetime or None, default None
        Expiry time; None never expires
    view_count : int, default 0
        Number of successful views

    """

    note_id: str
    token: str = field(default_factory=generate_share_token)
    is_public: bool = True
    include_css: bool = True
    expires_at: Optional[datetime] = None
    view_count: int = 0

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Return True if the share has an expiry time in the past."""
        if self.expires_at is None:
            return False
        return _as_utc(self.expires_at) < _as_utc(now or _utcnow())


def compute_expiry(expires_in: Optional[str], now: Optional[datetime] = None) -> Optional[datetime]:
    """Translate an expiry choice into an absolute time.

    Parameters
    ----------
    expires_in : {"1h", "24h", "7d", "30d", "never"} or None
        Lifetime of the share. ``"never"``, None and unrecognized values
        yield no expiry.
    now : datetime, optional
        Reference time, defaults to the current UTC time. Naive values are
        taken as UTC.

    Examples
    --------
        >>> from datetime import datetime
        >>> compute_expiry("1h", now=datetime(2025, 1, 1, 12, 0))
        datetime.datetime(2025, 1, 1, 13, 0, tzinfo=datetime.timezone.utc)
        >>> compute_expiry("never") is None
        True

    """
    if not expires_in:
        return None
    delta = SHARE_EXPIRY_DELTAS.get(expires_in)
    if delta is None:
        if expires_in != "never":
            logger.debug(f"Unrecognized share expiry {expires_in!r}; share will not expire")
        return None
    return _as_utc(now or _utcnow()) + delta


def create_share(
    note_id: str,
    include_css: bool = True,
    expires_in: Optional[str] = None,
    now: Optional[datetime] = None,
) -> SharedNote:
    """Create a public share for a note."""
    share = SharedNote(
        note_id=note_id,
        is_public=True,
        include_css=include_css,
        expires_at=compute_expiry(expires_in, now),
    )
    logger.info(f"Created share for note {note_id} (expires: {share.expires_at or 'never'})")
    return share


def update_share(
    share: SharedNote,
    is_public: Optional[bool] = None,
    include_css: Optional[bool] = None,
    expires_in: Any = UNSET,
    now: Optional[datetime] = None,
) -> SharedNote:
    """Update share settings in place and return the share.

    Parameters
    ----------
    share : SharedNote
        Share to modify
    is_public : bool, optional
        New visibility; non-boolean values leave it unchanged
    include_css : bool, optional
        New styling flag; non-boolean values leave it unchanged
    expires_in : str or None, optional
        New lifetime counted from ``now``. ``"never"`` or None clears the
        expiry. Unrecognized values and an omitted argument leave the
        current expiry unchanged.
    now : datetime, optional
        Reference time for the new expiry

    """
    if isinstance(is_public, bool):
        share.is_public = is_public
    if isinstance(include_css, bool):
        share.include_css = include_css

    if expires_in is not UNSET:
        if expires_in is None or expires_in == "never":
            share.expires_at = None
        elif expires_in in SHARE_EXPIRY_DELTAS:
            share.expires_at = compute_expiry(expires_in, now)
        else:
            logger.debug(f"Ignoring unrecognized share expiry {expires_in!r}")

    return share


def check_share_access(share: Optional[SharedNote], now: Optional[datetime] = None) -> SharedNote:
    """Verify that a share may be viewed.

    Raises
    ------
    ShareNotFoundError
        If there is no share (HTTP 404)
    ShareRevokedError
        If the share is no longer public (HTTP 403)
    ShareExpiredError
        If the share has expired (HTTP 410)

    """
    if share is None:
        raise ShareNotFoundError()
    if not share.is_public:
        raise ShareRevokedError()
    if share.is_expired(now):
        raise ShareExpiredError()
    return share


def render_shared_note(
    share: Optional[SharedNote],
    title: Optional[str],
    content: Any,
    now: Optional[datetime] = None,
) -> str:
    """Check access, count the view and render the note as an HTML fragment.

    Parameters
    ----------
    share : SharedNote or None
        Share looked up by token, None if the token is unknown
    title : str or None
        Note title
    content : Any
        The note's decoded document tree. Anything other than a mapping or
        a Document renders as an empty note; strings are never read as
        file paths or parsed as JSON.
    now : datetime, optional
        Reference time for the expiry check

    Returns
    -------
    str
        HTML fragment of the note

    """
    share = check_share_access(share, now)
    share.view_count += 1
    if content is not None and not isinstance(content, (Mapping, Document)):
        logger.warning(
            f"Shared note {share.note_id} has no document tree ({type(content).__name__}); rendering it empty"
        )
        content = None
    return to_html(content, title, include_styles=False)


__all__ = [
    "SharedNote",
    "generate_share_token",
    "compute_expiry",
    "create_share",
    "update_share",
    "check_share_access",
    "render_shared_note",
]
