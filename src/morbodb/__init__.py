from __future__ import annotations

from .collection import Collection
from .database import Database
from .errors import InvalidArgument, MorboDBError
from .registry import MorboDB

__version__ = "0.1.0"

__all__ = [
    "MorboDB",
    "Database",
    "Collection",
    "MorboDBError",
    "InvalidArgument",
    "__version__",
]
