"""Output schemas for root commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RootShowOutput(BaseOutputSchema):
    """Output schema for root show command."""
    path: str = Field(..., description="Note that was scanned")
    metalink_root: str | None = Field(..., description="Root declared by the first metalink, None if absent")


class RootInstallOutput(BaseOutputSchema):
    """Output schema for root install command."""
    path: str = Field(..., description="Note the metalink was installed into")
    root: str = Field(..., description="Root requested for installation")
    installed: bool = Field(..., description="Whether a metalink was appended")
    metalink_root: str | None = Field(..., description="Root in effect after the command, None if absent")


register_output_schema("root", "show", RootShowOutput)
register_output_schema("root", "install", RootInstallOutput)
