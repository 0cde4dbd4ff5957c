"""ActivationKind enum for link activation events."""

from enum import Enum


class ActivationKind(str, Enum):
    KEY = "key"
    CLICK = "click"
