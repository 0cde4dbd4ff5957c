"""Location clipboard persisted to a JSON file."""

import json
from contextlib import suppress
from pathlib import Path

from .Location import Location
from .LocationStore import LocationStore


class FileLocationStore(LocationStore):
    """LocationStore whose slot survives between CLI invocations.

    The slot is read from ``path`` on every peek and written atomically
    (temp file, then rename) on every replace.
    """

    def __init__(self, path: Path):
        super().__init__()
        self.path = path

    def peek(self) -> Location | None:
        if not self.path.exists():
            return None
        try:
            with self.path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in clipboard file {self.path}: {e}") from e
        if raw is None:
            return None
        try:
            return Location.from_dict(raw)
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid location in clipboard file {self.path}: {e}") from e

    def replace(self, location: Location) -> Location | None:
        previous = self.peek()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(location.to_dict(), fh, indent=4)
            temp_path.replace(self.path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save clipboard: {e}") from e
        return previous
