"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    path: str = Field(..., description="Path to the config file")
    exists: bool = Field(..., description="Whether the config file exists")
    config: dict[str, Any] = Field(..., description="Effective configuration after environment overrides")


register_output_schema("config", "show", ConfigShowOutput)
