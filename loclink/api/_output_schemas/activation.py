"""Output schemas for activation commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ActivationCheckOutput(BaseOutputSchema):
    """Output schema for activation check command."""
    path: str = Field(..., description="Note that was checked")
    category: str = Field(..., description="Document category derived from the file name")
    has_link: bool = Field(..., description="Whether any link text was found")
    enabled: bool = Field(..., description="Whether decoration would be enabled automatically")


register_output_schema("activation", "check", ActivationCheckOutput)
