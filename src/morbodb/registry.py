from __future__ import annotations

import logging
import threading

from .database import Database
from .naming import is_dynamic_name, require_name


logger = logging.getLogger(__name__)


class MorboDB:
    """In-memory, process-local registry of named databases.

    Databases are created on first request and live as long as the registry.
    Two ways to get one:

        morbo = MorboDB()
        db = morbo.get_database("mydb")
        # or
        db = morbo.mydb  # just like MongoDB; `morbo.mydb()` works too

    Registries never share state, not even within the same process.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._dbs: dict[str, Database] = {}

    def database_names(self) -> list[str]:
        """Return the names of all existing databases, sorted."""
        with self._lock:
            return sorted(self._dbs)

    def get_database(self, name: str | None = None) -> Database:
        """Return the database called `name`, creating it on first use.

        Raises :class:`~morbodb.errors.InvalidArgument` if `name` is empty or None.
        """
        name = require_name(name, kind="database")
        with self._lock:
            db = self._dbs.get(name)
            if db is None:
                db = Database(self, name)
                self._dbs[name] = db
                logger.debug("Created database %s", name)
            return db

    def get_master(self) -> bool:
        """Not implemented, always reports a healthy primary."""
        return True

    def __copy__(self) -> MorboDB:
        # A copy would share databases with this registry.
        raise TypeError(f"{type(self).__name__!r} objects cannot be copied")

    def __deepcopy__(self, memo: dict) -> MorboDB:
        raise TypeError(f"{type(self).__name__!r} objects cannot be copied")

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._dbs

    def __getattr__(self, name: str) -> Database:
        # Only reached when regular lookup fails, so real methods always win.
        if not is_dynamic_name(name):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return self.get_database(name)

    def __repr__(self) -> str:
        return f"MorboDB(databases={self.database_names()!r})"
