from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from .collection import Collection
from .naming import is_dynamic_name, require_name

if TYPE_CHECKING:
    from .registry import MorboDB


logger = logging.getLogger(__name__)


class Database:
    """One logical database handed out by :class:`~morbodb.registry.MorboDB`.

    Collections are created lazily, once per name:

        db = morbo.get_database("shop")
        orders = db.get_collection("orders")
        assert db.orders is orders
    """

    def __init__(self, top: MorboDB, name: str) -> None:
        self._top = top
        self._name = name
        self._lock = threading.RLock()
        self._collections: dict[str, Collection] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def top(self) -> MorboDB:
        """The registry that created this database."""
        return self._top

    def collection_names(self) -> list[str]:
        with self._lock:
            return sorted(self._collections)

    def get_collection(self, name: str | None = None) -> Collection:
        """Return the collection called `name`, creating it on first use."""
        name = require_name(name, kind="collection")
        with self._lock:
            coll = self._collections.get(name)
            if coll is None:
                coll = Collection(self, name)
                self._collections[name] = coll
                logger.debug("Created collection %s.%s", self._name, name)
            return coll

    def __getattr__(self, name: str) -> Collection:
        if not is_dynamic_name(name):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return self.get_collection(name)

    def __copy__(self) -> Database:
        # Each name maps to exactly one database owned by `top`.
        raise TypeError(f"{type(self).__name__!r} objects cannot be copied")

    def __deepcopy__(self, memo: dict) -> Database:
        raise TypeError(f"{type(self).__name__!r} objects cannot be copied")

    def __call__(self, *args: Any, **kwargs: Any) -> Database:
        # Lets `morbo.shop()` behave like `morbo.get_database("shop")`; arguments are ignored.
        return self

    def __repr__(self) -> str:
        return f"Database({self._name!r})"
