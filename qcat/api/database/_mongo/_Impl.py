"""MongoDB collection implementation."""

from typing import Any

from pymongo import MongoClient
from pymongo.errors import ConfigurationError, InvalidName, PyMongoError

from ...config.ArgumentError import ArgumentError
from .._AbstractImpl import _AbstractImpl
from ..DatabaseConfig import DatabaseConfig
from ..DatabaseConnectionError import DatabaseConnectionError
from ._Data import _Data as _DatabaseConfigData


class _Impl(_AbstractImpl):
    def __init__(self, database_config: DatabaseConfig):
        if not isinstance(database_config.data, _DatabaseConfigData):
            raise ArgumentError("MongoDB config data is required")
        self.uri = database_config.data.uri
        self.server_selection_timeout_ms = database_config.data.server_selection_timeout_ms
        self.database_name = database_config.database
        self.collection_name = database_config.collection
        self._client: MongoClient[Any] | None = None
        self._collection = None

    def __enter__(self):
        client: MongoClient[Any] | None = None
        try:
            client = MongoClient(self.uri, serverSelectionTimeoutMS=self.server_selection_timeout_ms)
            collection = client[self.database_name][self.collection_name]
            client.admin.command("ping")  # Test connection
        except (ConfigurationError, InvalidName, ValueError) as exc:
            # Malformed URI, or a database/collection name pymongo refuses
            self._close(client)
            raise ArgumentError(f"Invalid MongoDB settings for {self._redacted_uri()}: {exc}") from exc
        except PyMongoError as exc:
            self._close(client)
            raise DatabaseConnectionError(f"MongoDB at {self._redacted_uri()}", str(exc)) from exc
        except BaseException:
            self._close(client)
            raise
        self._client = client
        self._collection = collection
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._collection = None
        if self._client is not None:
            self._client.close()
            self._client = None
        return False

    @staticmethod
    def _close(client: MongoClient[Any] | None) -> None:
        if client is not None:
            client.close()

    def _redacted_uri(self) -> str:
        """Return the URI with any password replaced."""
        scheme, sep, rest = self.uri.partition("://")
        credentials, at, hosts = rest.rpartition("@")
        if not at:
            return self.uri
        user = credentials.split(":", 1)[0]
        return f"{scheme}{sep}{user}:***@{hosts}"
