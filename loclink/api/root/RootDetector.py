"""Root detection strategy type."""

from collections.abc import Callable

# Maps the active file to its project root (absolute, trailing separator) or None
RootDetector = Callable[[str], str | None]
