"""Base class for user-facing loclink errors."""


class LoclinkError(Exception):
    """A non-fatal, user-facing failure of a loclink operation.

    Raised at the point of the failing operation; no state is modified
    before it is raised.
    """
