"""Database public API."""

import importlib
from typing import Any

from ...utils.logger import get_logger
from ._AbstractImpl import _AbstractImpl
from .DatabaseConfig import _BACKEND_REGISTRY, DatabaseConfig

logger = get_logger("database")


class Database:
    """One connection to one collection, opened on enter and closed on exit.

    A handle is single use: once closed it cannot be reopened, so two runs
    never share a connection.
    """

    def __init__(self, database_config: DatabaseConfig):
        self.database_config = database_config
        self._impl: _AbstractImpl | None = None
        self._closed = False

    def __enter__(self) -> "Database":
        if self._closed:
            raise RuntimeError("Database handle already closed; open a new one for each run")
        if self._impl is not None:
            raise RuntimeError("Database handle already open")

        backend_type = self.database_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Import database implementation class directly from backend _Impl module
        module = importlib.import_module(f"qcat.api.database._{backend_type}._Impl")
        impl = module._Impl(self.database_config)
        impl.__enter__()
        self._impl = impl
        logger.info(f"Connected to {self.database_config.target}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        impl = self._impl
        if impl is None:
            return False
        self._impl = None
        self._closed = True
        try:
            return impl.__exit__(exc_type, exc_val, exc_tb)
        finally:
            logger.info(f"Connection to {self.database_config.target} closed")

    @property
    def is_open(self) -> bool:
        return self._impl is not None

    def _require_open(self) -> _AbstractImpl:
        if self._impl is None:
            state = "closed" if self._closed else "not open"
            raise RuntimeError(f"Database {state}. Use as context manager first.")
        return self._impl

    def find(
        self,
        filter: dict[str, Any] | None = None,
        projection: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
        limit: int = 0,
    ) -> list[dict[str, Any]]:
        return self._require_open().find(filter, projection, sort, limit)

    def update_one(self, filter: dict[str, Any], update: dict[str, Any], upsert: bool = False) -> dict[str, Any]:
        """Update the first matching document.

        Returns:
            Dict with ``matched_count``, ``modified_count`` and ``upserted_id``
        """
        return self._require_open().update_one(filter, update, upsert)

    def delete_one(self, filter: dict[str, Any]) -> dict[str, Any]:
        """Delete the first matching document.

        Returns:
            Dict with ``deleted_count`` (0 when nothing matched)
        """
        return self._require_open().delete_one(filter)

    def aggregate(self, pipeline: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return self._require_open().aggregate(pipeline)

    def create_index(self, keys: list[tuple[str, int]], **options: Any) -> str:
        """Create an index and return its name.

        Creating an index that already exists with the same key spec is a no-op.
        """
        return self._require_open().create_index(keys, **options)

    def list_indexes(self) -> list[dict[str, Any]]:
        """List index descriptors as ``{"name": ..., "key": [[field, direction], ...]}``."""
        return self._require_open().list_indexes()

    def insert_many(self, documents: list[dict[str, Any]]) -> int:
        return self._require_open().insert_many(documents)

    def delete_many(self, filter: dict[str, Any]) -> int:
        return self._require_open().delete_many(filter)

    def count_documents(self, filter: dict[str, Any] | None = None) -> int:
        return self._require_open().count_documents(filter)
