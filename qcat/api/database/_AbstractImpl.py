"""Abstract base class for database collection implementations."""

from abc import ABC, abstractmethod
from typing import Any

from pymongo.collection import Collection


class _AbstractImpl(ABC):
    """One backend connection bound to one collection.

    Subclasses open the client in ``__enter__`` and release it in ``__exit__``.
    The collection methods below are shared because every backend speaks the
    pymongo collection API.
    """

    _collection: Collection | None = None

    @abstractmethod
    def __enter__(self):
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    def _require_collection(self) -> Collection:
        if self._collection is None:
            raise RuntimeError("Collection not initialized. Use as context manager first.")
        return self._collection

    def find(
        self,
        filter: dict[str, Any] | None = None,
        projection: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
        limit: int = 0,
    ) -> list[dict[str, Any]]:
        cursor = self._require_collection().find(filter or {}, projection)
        if sort:
            cursor = cursor.sort(sort)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def update_one(self, filter: dict[str, Any], update: dict[str, Any], upsert: bool = False) -> dict[str, Any]:
        result = self._require_collection().update_one(filter, update, upsert=upsert)
        return {
            "matched_count": result.matched_count,
            "modified_count": result.modified_count,
            "upserted_id": result.upserted_id,
        }

    def delete_one(self, filter: dict[str, Any]) -> dict[str, Any]:
        return {"deleted_count": self._require_collection().delete_one(filter).deleted_count}

    def aggregate(self, pipeline: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return list(self._require_collection().aggregate(pipeline))

    def create_index(self, keys: list[tuple[str, int]], **options: Any) -> str:
        return self._require_collection().create_index(keys, **options)

    def list_indexes(self) -> list[dict[str, Any]]:
        indexes = []
        for index in self._require_collection().list_indexes():
            key = index["key"]
            # pymongo returns SON, mongomock a list of pairs
            pairs = key.items() if hasattr(key, "items") else key
            indexes.append({"name": index["name"], "key": [[field, direction] for field, direction in pairs]})
        return indexes

    def insert_many(self, documents: list[dict[str, Any]]) -> int:
        if not documents:
            return 0
        return len(self._require_collection().insert_many(documents).inserted_ids)

    def delete_many(self, filter: dict[str, Any]) -> int:
        return self._require_collection().delete_many(filter).deleted_count

    def count_documents(self, filter: dict[str, Any] | None = None) -> int:
        return self._require_collection().count_documents(filter or {})
