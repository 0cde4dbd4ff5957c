"""Location value object."""

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Location:
    """A line in a file, optionally anchored to a project root.

    ``file`` is kept exactly as captured or as written in a link; it may be
    relative or absolute. ``line`` is 1-based.
    """

    file: str
    line: int
    root: str | None = None

    def __post_init__(self):
        if not isinstance(self.file, str):
            raise TypeError("Location file must be a string")
        if not self.file:
            raise ValueError("Location file must not be empty")
        if "[" in self.file or "]" in self.file:
            raise ValueError(f"Brackets are not supported in link paths: {self.file}")
        if "\n" in self.file:
            raise ValueError("Location file must not contain a line break")
        if isinstance(self.line, bool) or not isinstance(self.line, int):
            raise TypeError("Location line must be an integer")
        if self.line < 1:
            raise ValueError(f"Location line must be >= 1, got {self.line}")
        if self.root is not None and not isinstance(self.root, str):
            raise TypeError("Location root must be a string or None")

    def with_root(self, root: str | None) -> "Location":
        """Return a copy anchored to ``root``."""
        return replace(self, root=root)

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.file, "line": self.line, "root": self.root}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Location":
        return cls(file=data["file"], line=data["line"], root=data.get("root"))
