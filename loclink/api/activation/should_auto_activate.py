"""Auto-activation predicate (UNO: single function)."""

from collections.abc import Collection

from ..link.has_link import has_link


def should_auto_activate(category: str, text: str, allow_list: Collection[str] = ()) -> bool:
    """Decide whether link decoration should be enabled for a newly opened document.

    Args:
        category: Document category (see ``document_category``)
        text: Full document text
        allow_list: Categories eligible for auto-activation; empty allows every category
    """
    if allow_list and category.lower() not in {item.lower() for item in allow_list}:
        return False
    return has_link(text)
