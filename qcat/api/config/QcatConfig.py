"""Top-level qcat configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..database.DatabaseConfig import DatabaseConfig
from .ArgumentError import ArgumentError
from .get_config_path import get_config_path
from .LogConfig import LogConfig

# Environment variable -> (section key, field path)
_ENV_OVERRIDES: dict[str, tuple[str, ...]] = {
    "QCAT_MONGO_URI": ("data", "uri"),
    "QCAT_DATABASE": ("database",),
    "QCAT_COLLECTION": ("collection",),
}


class QcatConfig(BaseModel):
    """Top-level configuration: where to connect and how to log."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    database: DatabaseConfig = Field(default_factory=lambda: DatabaseConfig(type="mongo"))
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        return get_config_path()

    @classmethod
    def load(cls, path: Path | None = None) -> "QcatConfig":
        """Load config from file (optional) and apply environment overrides.

        A missing config file means defaults. ``QCAT_MONGO_URI``,
        ``QCAT_DATABASE`` and ``QCAT_COLLECTION`` override the file.

        Raises:
            ArgumentError: If the file holds invalid JSON or fails validation
        """
        path = path or cls.get_config_path()

        raw: dict[str, Any] = {}
        if path.exists():
            try:
                with path.open() as fh:
                    raw = json.load(fh)
            except json.JSONDecodeError as e:
                raise ArgumentError(f"Invalid JSON in config file {path}: {e}") from e
            if not isinstance(raw, dict):
                raise ArgumentError(f"Config file {path} must hold a JSON object")

        raw = cls._apply_env_overrides(raw)

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ArgumentError(f"Configuration validation error: {detail}") from e

    @staticmethod
    def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
        raw = dict(raw)
        database = dict(raw.get("database") or {})
        for env_name, field_path in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if not value:
                continue
            if field_path[0] == "data":
                # Only the mongo backend takes a URI
                if database.get("type", "mongo") != "mongo":
                    continue
                data = dict(database.get("data") or {})
                data[field_path[1]] = value
                database["data"] = data
            else:
                database[field_path[0]] = value
        raw["database"] = database
        return raw

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "database": self.database.model_dump(),
            "log": self.log.model_dump(),
        }
