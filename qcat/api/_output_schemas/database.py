"""Output schemas for database commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class DatabaseSeedOutput(BaseOutputSchema):
    """Output schema for database seed command."""

    database: str = Field(..., description="Database name")
    collection: str = Field(..., description="Collection name")
    deleted_count: int = Field(..., description="Documents removed before seeding, 0 unless replacing")
    inserted_count: int = Field(..., description="Number of documents inserted")


class DatabaseResetOutput(BaseOutputSchema):
    """Output schema for database reset command."""

    database: str = Field(..., description="Database name")
    collection: str = Field(..., description="Collection name")
    deleted_count: int = Field(..., description="Number of documents deleted, -1 if not applicable")


register_output_schema("database", "seed", DatabaseSeedOutput)
register_output_schema("database", "reset", DatabaseResetOutput)
