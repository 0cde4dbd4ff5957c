"""Resolve a location to a filesystem path."""

from pathlib import Path

from ..location.Location import Location


def resolve_location(location: Location) -> Path:
    """Resolve ``location.file`` against ``location.root``.

    - Absolute file (after ``~`` expansion): returned unchanged.
    - Relative file with a root: joined onto the root.
    - Relative file without a root: returned as-is, relative to the
      caller's working directory.
    """
    file_path = Path(location.file).expanduser()
    if file_path.is_absolute():
        return file_path
    if location.root:
        return Path(location.root).expanduser() / file_path
    return file_path
