"""MongoDB-specific configuration data."""

from pydantic import BaseModel, Field, field_validator

from ....constants import DEFAULT_MONGO_URI


class _Data(BaseModel):
    uri: str = Field(
        default=DEFAULT_MONGO_URI,
        description="MongoDB connection URI.",
    )
    server_selection_timeout_ms: int = Field(
        default=5000,
        gt=0,
        description="How long to wait for a server before failing the connection.",
    )

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("uri")
    @classmethod
    def validate_uri(cls, v: str) -> str:
        if not v:
            raise ValueError("database.data.uri is required when database.type is 'mongo'")
        if not (v.startswith("mongodb://") or v.startswith("mongodb+srv://")):
            raise ValueError(f"database.data.uri must start with 'mongodb://' or 'mongodb+srv://' (found: {v!r})")
        return v
