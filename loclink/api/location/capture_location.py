"""Capture the current line into the clipboard."""

import logging
from pathlib import Path

from ..config.normalize_path import normalize_path
from ..root.detect_root import detect_root as default_detect_root
from ..root.RootDetector import RootDetector
from .Location import Location
from .LocationStore import LocationStore
from .NoBackingFileError import NoBackingFileError

logger = logging.getLogger(__name__)


def capture_location(
    store: LocationStore,
    file_path: str | Path | None,
    line: int,
    detect_root: RootDetector = default_detect_root,
) -> Location:
    """Record ``file_path:line`` in ``store``, replacing whatever it held.

    Args:
        store: Clipboard to overwrite
        file_path: Backing path of the active document, or None if it has none
        line: 1-based line of the cursor
        detect_root: Strategy mapping the file to its project root

    Raises:
        NoBackingFileError: If the document has no backing path
    """
    if file_path is None or str(file_path) == "":
        raise NoBackingFileError()

    file = str(normalize_path(file_path))
    location = Location(file=file, line=line, root=detect_root(file))
    store.replace(location)
    logger.info("Captured %s:%d (root %s)", location.file, location.line, location.root)
    return location
