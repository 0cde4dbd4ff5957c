"""NavigationState enum for link following."""

from enum import Enum


class NavigationState(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    FOUND = "found"
    NOT_FOUND = "not_found"
