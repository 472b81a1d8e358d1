from __future__ import annotations

from .errors import InvalidArgument


def require_name(name: str | None, *, kind: str) -> str:
    """Return `name` unchanged, or raise if it is missing or not text.

    Names are case-sensitive and may contain any character, including
    surrounding whitespace.
    """
    if name is None:
        raise InvalidArgument(f"You must provide the name of the {kind} to get.")
    if not isinstance(name, str):
        raise InvalidArgument(f"The name of the {kind} must be a string, got {type(name).__name__}.")
    if name == "":
        raise InvalidArgument(f"You must provide the name of the {kind} to get.")
    return name


def is_dynamic_name(name: str) -> bool:
    # Underscore names belong to Python's own protocols (copy, pickle, repr helpers).
    return not name.startswith("_")
