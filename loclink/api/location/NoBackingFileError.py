from ..LoclinkError import LoclinkError


class NoBackingFileError(LoclinkError):
    """Capture was attempted on a document that has no file path."""

    def __init__(self, message: str = "Document is not visiting a file"):
        super().__init__(message)
