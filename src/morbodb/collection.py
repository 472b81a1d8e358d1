from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .database import Database


class Collection:
    """A named collection inside a :class:`~morbodb.database.Database`.

    Only the owning database creates collections. The handle carries its
    namespace and nothing else; documents are not stored here.
    """

    def __init__(self, database: Database, name: str) -> None:
        self._database = database
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def database(self) -> Database:
        return self._database

    @property
    def full_name(self) -> str:
        return f"{self._database.name}.{self._name}"

    def __call__(self, *args: Any, **kwargs: Any) -> Collection:
        # `db.users()` is the same collection as `db.users`.
        return self

    def __repr__(self) -> str:
        return f"Collection({self.full_name!r})"
