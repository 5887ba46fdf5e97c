"""Runtime configuration for the ranking engine.

Relies on pydantic-settings so that environment variables (prefixed with ``TOURRANK_``)
can override defaults. See `.env.example` for common values.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Merged hotels never carry more images than this.
MAX_IMAGES = 10


class EngineSettings(BaseSettings):
    """Captures tunables for matching, merging and ranking."""

    match_threshold: float = Field(
        default=0.7, description="Minimum match confidence (exclusive) to join a hotel group"
    )
    max_images: int = Field(default=MAX_IMAGES, description="Maximum number of images kept per merged hotel")
    short_description_length: int = Field(
        default=200, description="Characters kept in the short hotel description"
    )
    budget_floor_ratio: float = Field(
        default=0.4, description="Offers cheaper than this share of the budget are dropped as suspicious"
    )
    default_adults: int = Field(
        default=2, description="Party size assumed by the budget filter when the request has no adults"
    )
    currency: str = Field(default="RUB", description="Currency reported on options and price ranges")

    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("data/logs"))
    output_dir: Path = Field(default=Path("data/output"), description="Where the CLI writes ranked cards")

    model_config = SettingsConfigDict(
        env_prefix="TOURRANK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("match_threshold", "budget_floor_ratio")
    def _validate_ratio(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("ratio settings must be between 0 and 1")
        return value

    @field_validator("max_images", "default_adults")
    def _validate_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("value must be positive")
        return value

    @field_validator("max_images")
    def _validate_image_cap(cls, value: int) -> int:
        if value > MAX_IMAGES:
            raise ValueError(f"max_images cannot exceed {MAX_IMAGES}")
        return value

    @field_validator("log_dir", "output_dir", mode="before")
    def _expand_dir(cls, value: str | Path) -> Path:
        if isinstance(value, Path):
            return value.expanduser()
        return Path(value).expanduser()

    def ensure_directories(self) -> None:
        """Create directories that must exist at runtime."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.output_dir.mkdir(parents=True, exist_ok=True)


# Engine default when callers pass no settings. Built without reading the
# environment or `.env`; only the CLI constructs `EngineSettings()` from them.
DEFAULT_SETTINGS = EngineSettings.model_construct()
