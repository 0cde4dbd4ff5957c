"""Output schemas for navigate commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class NavigateFollowOutput(BaseOutputSchema):
    """Output schema for navigate follow command."""
    path: str = Field(..., description="Note containing the link")
    state: str = Field(..., description="Final navigation state (idle, found, not_found)")
    target_path: str | None = Field(..., description="Resolved target file, None if no link at point")
    line: int | None = Field(..., description="Target line number, None if no link at point")
    offset: int | None = Field(..., description="Character offset of the target line, None unless found")


register_output_schema("navigate", "follow", NavigateFollowOutput)
