"""Top-level loclink configuration."""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from .ActivationConfig import ActivationConfig
from .LogConfig import LogConfig
from .RootConfig import RootConfig


class LoclinkConfig(BaseModel):
    """Top-level configuration for loclink layers."""

    model_config = ConfigDict(extra="forbid")

    activation: ActivationConfig = Field(default_factory=ActivationConfig)
    root: RootConfig = Field(default_factory=RootConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @computed_field
    def path(self) -> Path:
        """Path to config file."""
        return self.get_config_path()

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get loclink home directory based on LOCLINK_HOME or default to ~/.loclink."""
        home_env = os.environ.get("LOCLINK_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".loclink"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the loclink home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "LoclinkConfig":
        """Load and validate config from file.

        Every section has defaults, so a missing config file yields the
        default configuration.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert LoclinkConfig instance to a dictionary for serialization."""
        return {
            "activation": self.activation.model_dump(),
            "root": self.root.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
