from pathlib import Path


def document_category(path: str | Path) -> str:
    """Category of a document: its lower-case suffix without the dot, or ``text``."""
    suffix = Path(path).suffix.lower().lstrip(".")
    return suffix or "text"
