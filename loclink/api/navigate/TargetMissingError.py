from pathlib import Path

from ..LoclinkError import LoclinkError


class TargetMissingError(LoclinkError):
    """The resolved link target does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No such file: {path}")
