"""Location API domain."""

from .._output_schemas.location import LocationCaptureOutput, LocationPasteOutput, LocationShowOutput

__all__ = [
    "LocationCaptureOutput",
    "LocationPasteOutput",
    "LocationShowOutput",
]
