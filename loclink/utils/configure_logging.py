import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def is_configured() -> bool:
    return _CONFIGURED


def configure_logging(loclink_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified loclink logging.

    Args:
        loclink_home: Path to loclink home directory. If None, derived from environment.
        level: Level name as stored in LogConfig (DEBUG, INFO, WARN, ERROR).
    """
    global _CONFIGURED
    root_logger = logging.getLogger("loclink")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))
    if _CONFIGURED:
        return

    if loclink_home is None:
        env_home = os.environ.get("LOCLINK_HOME")
        loclink_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".loclink"

    loclink_home.mkdir(parents=True, exist_ok=True)
    log_file = loclink_home / "loclink.log"

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach loclink handlers so the next configure_logging call starts fresh."""
    global _CONFIGURED
    root_logger = logging.getLogger("loclink")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
