"""LinkKind enum for classified link spans."""

from enum import Enum


class LinkKind(str, Enum):
    LOCATION = "location"
    METALINK = "metalink"
    UNKNOWN = "unknown"
