"""Output schemas for location (clipboard) commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LocationCaptureOutput(BaseOutputSchema):
    """Output schema for location capture command."""
    location: dict[str, Any] | None = Field(..., description="Captured location, None if capture failed")
    previous: dict[str, Any] | None = Field(..., description="Location that was overwritten, None if slot was empty")


class LocationPasteOutput(BaseOutputSchema):
    """Output schema for location paste command."""
    path: str = Field(..., description="Note the link was pasted into")
    offset: int = Field(..., description="Character offset of the insertion")
    inserted: str = Field(..., description="Link text inserted, empty if paste failed")
    metalink_installed: bool = Field(..., description="Whether a metalink was appended to the note")
    metalink_root: str | None = Field(..., description="Metalink root used for serialization, None if absent")


class LocationShowOutput(BaseOutputSchema):
    """Output schema for location show command."""
    location: dict[str, Any] | None = Field(..., description="Location held in the clipboard, None if empty")
    store_path: str = Field(..., description="File backing the clipboard")


register_output_schema("location", "capture", LocationCaptureOutput)
register_output_schema("location", "paste", LocationPasteOutput)
register_output_schema("location", "show", LocationShowOutput)
