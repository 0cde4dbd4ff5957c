"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkListOutput(BaseOutputSchema):
    """Output schema for link list command."""
    path: str = Field(..., description="Note that was scanned")
    metalink_root: str | None = Field(..., description="Root declared by the note's first metalink, None if absent")
    links: list[dict[str, Any]] = Field(..., description="Link spans found in document order")
    count: int = Field(..., description="Number of link spans found")


register_output_schema("link", "list", LinkListOutput)
