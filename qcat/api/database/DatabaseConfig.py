"""Database configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...constants import DEFAULT_COLLECTION_NAME, DEFAULT_DATABASE_NAME
from ._mongo._Data import _Data as _MongoData
from ._mongomock._Data import _Data as _MongomockData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "mongo": _MongoData,
    "mongomock": _MongomockData,
}


class DatabaseConfig(BaseModel):
    """Where the catalog runs: backend type, database name, collection name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: str = Field(default="mongo", description="Database backend type")
    database: str = Field(default=DEFAULT_DATABASE_NAME, description="Database name")
    collection: str = Field(default=DEFAULT_COLLECTION_NAME, description="Collection name")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"database config must be a dict, got {type(values).__name__}")
        values = dict(values)
        database_type = values.setdefault("type", "mongo")
        config_data_class = _BACKEND_REGISTRY.get(database_type)
        if not config_data_class:
            raise ValueError(f"Unknown backend type: {database_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            data = {}
        if isinstance(data, dict):
            values["data"] = config_data_class(**data)
        elif not isinstance(data, config_data_class):
            raise ValueError(f"database.data does not match backend type {database_type!r}")
        return values

    @property
    def target(self) -> str:
        """Describe the collection this config points at, without credentials."""
        return f"{self.type}:{self.database}.{self.collection}"

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        # Explicitly serialize the data field since it's typed as BaseModel
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
