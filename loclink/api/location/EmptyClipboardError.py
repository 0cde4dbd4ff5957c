from ..LoclinkError import LoclinkError


class EmptyClipboardError(LoclinkError):
    """Paste was attempted before any location was captured."""

    def __init__(self, message: str = "No location captured yet"):
        super().__init__(message)
