"""Base classes for parser and renderer options.

This module defines the foundation classes for the format-specific options
used throughout the notemark conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

UNSET = object()


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> Self:
        """Build an options instance from a configuration mapping.

        Unknown keys are rejected so that typos in configuration files are
        reported instead of silently ignored.

        Parameters
        ----------
        values : Mapping[str, Any]
            Field names and values, e.g. one section of a config file

        Returns
        -------
        Self
            New options instance

        Raises
        ------
        ValueError
            If a key does not name a field of this options class

        """
        known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown {cls.__name__} option(s): {', '.join(unknown)}")
        return cls(**dict(values))


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate base renderer options."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Notes
    -----
    Subclasses define format-specific parsing options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate base parser options."""
        pass
