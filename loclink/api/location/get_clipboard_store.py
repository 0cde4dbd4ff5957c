from ..config.LoclinkConfig import LoclinkConfig
from .FileLocationStore import FileLocationStore


def get_clipboard_store() -> FileLocationStore:
    """Clipboard shared by every CLI invocation, kept in the loclink home."""
    return FileLocationStore(LoclinkConfig.get_home_dir() / "clipboard.json")
