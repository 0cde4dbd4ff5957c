# Names whose presence marks a directory as a project root
DEFAULT_ROOT_MARKERS = (
    ".git",
    ".hg",
    ".svn",
    ".project",
    ".projectile",
    "pyproject.toml",
    "setup.py",
)
