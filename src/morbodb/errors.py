from __future__ import annotations


class MorboDBError(Exception):
    """Base exception for MorboDB errors."""

    pass


class InvalidArgument(MorboDBError, ValueError):
    """Raised when a database or collection is requested without a name."""

    pass
