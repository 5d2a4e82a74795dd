"""Mock MongoDB collection implementation using mongomock."""

import mongomock

from ...config.ArgumentError import ArgumentError
from .._AbstractImpl import _AbstractImpl
from ..DatabaseConfig import DatabaseConfig
from ._client import _get_mongomock_client
from ._Data import _Data


class _Impl(_AbstractImpl):
    def __init__(self, database_config: DatabaseConfig):
        if not isinstance(database_config.data, _Data):
            raise ArgumentError("MongoMock config data is required")
        self.database_name = database_config.database
        self.collection_name = database_config.collection
        self._client: mongomock.MongoClient | None = None
        self._collection = None

    def __enter__(self):
        self._client = _get_mongomock_client()
        self._collection = self._client[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Don't close shared client - data must outlive one handle
        self._collection = None
        self._client = None
        return False
