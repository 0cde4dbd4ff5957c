"""Root detection configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..root.DEFAULT_ROOT_MARKERS import DEFAULT_ROOT_MARKERS


class RootConfig(BaseModel):
    """Project root detection and metalink installation policy."""

    model_config = ConfigDict(extra="forbid")

    markers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ROOT_MARKERS),
        min_length=1,
        description="File or directory names that mark a project root",
    )
    metalink_policy: Literal["ask", "always", "never"] = Field(
        "ask", description="Whether pasting installs a metalink into notes that have none"
    )
