"""Output schemas for API commands.

Importing this package registers every schema with the registry.
"""

from . import catalog, config, database
from ._registry import get_output_schema, register_output_schema

__all__ = ["catalog", "config", "database", "get_output_schema", "register_output_schema"]
