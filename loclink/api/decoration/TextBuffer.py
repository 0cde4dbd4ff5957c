"""Live, editable text buffer."""

from collections.abc import Callable
from pathlib import Path

# Called after every edit with (start, old_end, new_end)
EditListener = Callable[[int, int, int], None]


class TextBuffer:
    """Mutable document text with edit notification.

    Offsets are character indices into ``text``. Listeners are told about
    every edit so that attached state (decorations) can follow the text.
    """

    def __init__(self, text: str = "", path: str | Path | None = None):
        self._text = text
        self.path = Path(path) if path is not None else None
        self._listeners: list[EditListener] = []

    @classmethod
    def from_file(cls, path: str | Path) -> "TextBuffer":
        file_path = Path(path)
        return cls(file_path.read_text(encoding="utf-8"), path=file_path)

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def subscribe(self, listener: EditListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: EditListener) -> None:
        self._listeners.remove(listener)

    def insert(self, offset: int, text: str) -> None:
        self.replace(offset, offset, text)

    def delete(self, start: int, end: int) -> None:
        self.replace(start, end, "")

    def replace(self, start: int, end: int, text: str) -> None:
        """Replace ``text[start:end]`` with ``text`` and notify listeners."""
        if not 0 <= start <= end <= len(self._text):
            raise IndexError(f"Edit range {start}..{end} outside buffer of length {len(self._text)}")
        self._text = self._text[:start] + text + self._text[end:]
        new_end = start + len(text)
        for listener in list(self._listeners):
            listener(start, end, new_end)

    def line_bounds(self, start: int, end: int | None = None) -> tuple[int, int]:
        """Expand ``start..end`` to the physical lines containing both ends.

        The returned end stops before the line break of the last line.
        """
        if end is None:
            end = start
        start = min(max(start, 0), len(self._text))
        end = min(max(end, start), len(self._text))
        line_start = self._text.rfind("\n", 0, start) + 1
        line_end = self._text.find("\n", end)
        if line_end == -1:
            line_end = len(self._text)
        return line_start, line_end

    def save(self, path: str | Path | None = None) -> Path:
        """Write the buffer to ``path`` (default: its backing path)."""
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("Buffer has no backing path")
        target.write_text(self._text, encoding="utf-8")
        self.path = target
        return target
