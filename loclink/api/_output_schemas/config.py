"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""
    section: str = Field(..., description="Section shown, empty string when listing sections")
    config_path: str = Field(..., description="Path to the configuration file")
    content: dict[str, Any] = Field(..., description="Section content, or section names when listing")


register_output_schema("config", "show", ConfigShowOutput)
