"""Check a database config is usable before connecting."""

from ..config.ArgumentError import ArgumentError
from .DatabaseConfig import DatabaseConfig

# Characters MongoDB refuses in database names
_DATABASE_NAME_FORBIDDEN = frozenset('/\\. "$*<>:|?\x00')
_DATABASE_NAME_MAX_BYTES = 63


def _check_database_name(name: str) -> None:
    if not name.strip():
        raise ArgumentError("database name must not be empty")
    for char in name:
        if char in _DATABASE_NAME_FORBIDDEN:
            raise ArgumentError(f"database name {name!r} cannot contain {char!r}")
    if len(name.encode("utf-8")) > _DATABASE_NAME_MAX_BYTES:
        raise ArgumentError(f"database name {name!r} is longer than {_DATABASE_NAME_MAX_BYTES} bytes")


def _check_collection_name(name: str) -> None:
    if not name.strip():
        raise ArgumentError("collection name must not be empty")
    for char in ("$", "\x00"):
        if char in name:
            raise ArgumentError(f"collection name {name!r} cannot contain {char!r}")
    if name.startswith(".") or name.endswith(".") or ".." in name:
        raise ArgumentError(f"collection name {name!r} cannot start or end with '.' or contain '..'")
    if name.startswith("system."):
        raise ArgumentError(f"collection name {name!r} is reserved (system.*)")


def validate_database_config(config: DatabaseConfig) -> None:
    """Raise ArgumentError if the config cannot name a collection MongoDB would accept."""
    if not isinstance(config, DatabaseConfig):
        raise ArgumentError(f"Expected DatabaseConfig, got {type(config).__name__}")
    _check_database_name(config.database)
    _check_collection_name(config.collection)
    uri = getattr(config.data, "uri", None)
    if config.type == "mongo" and not uri:
        raise ArgumentError("database.data.uri must not be empty")
