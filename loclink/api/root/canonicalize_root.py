"""Canonicalize a project root path.

Expands user home directory (~), makes the path absolute WITHOUT resolving
symlinks, and ends it with exactly one path separator so that roots read
the same whichever way they were detected or typed.
"""

import os
from pathlib import Path

from ..config.normalize_path import normalize_path


def canonicalize_root(path: str | Path) -> str:
    """Return ``path`` as an absolute directory path with one trailing separator.

    Examples:
        >>> canonicalize_root("/a/b")
        '/a/b/'
        >>> canonicalize_root("/a/b//")
        '/a/b/'
    """
    text = str(normalize_path(path))
    return text.rstrip(os.sep) + os.sep
