"""Default project root detection strategy."""

import logging
from collections.abc import Iterable

from ..config.normalize_path import normalize_path
from .canonicalize_root import canonicalize_root
from .DEFAULT_ROOT_MARKERS import DEFAULT_ROOT_MARKERS
from .RootDetector import RootDetector

logger = logging.getLogger(__name__)


def detect_root(active_file: str, markers: Iterable[str] = DEFAULT_ROOT_MARKERS) -> str | None:
    """Find the project directory enclosing ``active_file``.

    Walks from the file's directory up to the filesystem root and returns
    the nearest directory that contains one of ``markers``.

    Returns:
        Canonical root (absolute, trailing separator), or None if no
        ancestor carries a marker.
    """
    if not active_file:
        return None
    marker_names = tuple(markers)
    anchor = normalize_path(active_file)
    if not anchor.is_dir():
        anchor = anchor.parent

    for candidate in [anchor, *anchor.parents]:
        for marker in marker_names:
            if (candidate / marker).exists():
                root = canonicalize_root(candidate)
                logger.debug("Detected root %s for %s (marker %s)", root, active_file, marker)
                return root
    logger.debug("No project root found for %s", active_file)
    return None


def make_root_detector(markers: Iterable[str]) -> RootDetector:
    """Build a detection strategy that looks for ``markers``."""
    marker_names = tuple(markers)

    def _detect(active_file: str) -> str | None:
        return detect_root(active_file, marker_names)

    return _detect
