from .LINK_PATTERN import ANY_LINK_PATTERN


def has_link(text: str) -> bool:
    """Return True if any ``#[...]`` link text occurs in ``text``."""
    return ANY_LINK_PATTERN.search(text) is not None
