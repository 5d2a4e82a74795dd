"""Output schemas for catalog commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class CatalogRunOutput(BaseOutputSchema):
    """Output schema for catalog run command."""

    database: str = Field(..., description="Database name")
    collection: str = Field(..., description="Collection name")
    policy: str = Field(..., description="Fault policy used for the run")
    total: int = Field(..., description="Number of operations in the catalog")
    succeeded: int = Field(..., description="Number of operations that succeeded")
    failed: int = Field(..., description="Number of operations that failed")
    outcomes: list[dict[str, Any]] = Field(..., description="One outcome per executed operation, in catalog order")


class CatalogListOutput(BaseOutputSchema):
    """Output schema for catalog list command."""

    source: str = Field(..., description="Catalog file path, or 'builtin'")
    operations: list[dict[str, Any]] = Field(..., description="Operation names, kinds and arguments")


register_output_schema("catalog", "run", CatalogRunOutput)
register_output_schema("catalog", "list", CatalogListOutput)
