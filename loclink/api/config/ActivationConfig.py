"""Auto-activation configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ActivationConfig(BaseModel):
    """Which document categories get link decoration automatically."""

    model_config = ConfigDict(extra="forbid")

    categories: list[str] = Field(
        default_factory=list,
        description="Allow-list of document categories (file suffixes); empty enables every category",
    )

    @field_validator("categories")
    @classmethod
    def _normalize_categories(cls, value: list[str]) -> list[str]:
        return [item.strip().lower().lstrip(".") for item in value if item.strip()]
