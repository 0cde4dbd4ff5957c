"""Location link serializer (UNO: single function)."""

from pathlib import Path

from ..location.Location import Location


def serialize_location(location: Location, metalink_root: str | None = None) -> str:
    """Render ``location`` as link text, terminated by a line break.

    When ``metalink_root`` is given and the file is an absolute path under
    it, the file is written relative to the root so the note stays portable.
    Any other path is written unchanged.
    """
    file = location.file
    if metalink_root:
        root = Path(metalink_root).expanduser()
        path = Path(file).expanduser()
        if path.is_absolute() and root.is_absolute() and path.is_relative_to(root) and path != root:
            file = path.relative_to(root).as_posix()
    return f"#[{file}:L{location.line}]\n"
