"""User-friendly run configuration loader for manual ranking runs."""
from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Iterable, Optional, TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

from tour_ranker.ranking.models import BUDGET_PER_PERSON, BUDGET_TOTAL, SearchRequest

if TYPE_CHECKING:  # pragma: no cover
    from tour_ranker.config.settings import EngineSettings


def _coerce_string_list(value: object) -> list[str]:
    if value in (None, "", ()):
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, Iterable):
        result: list[str] = []
        for item in value:
            text = str(item).strip()
            if text:
                result.append(text)
        return result
    raise TypeError("Expected string or list of strings")


class SearchSection(BaseModel):
    """Search request decoded from the run config."""

    budget: Optional[float] = Field(default=None, gt=0)
    budget_type: str = Field(default=BUDGET_TOTAL, description="'total' or 'perPerson'")
    adults: int = Field(default=2, ge=0)
    children: int = Field(default=0, ge=0)
    destination: str = ""
    requirements: list[str] = Field(default_factory=list)

    @field_validator("budget_type")
    @classmethod
    def _validate_budget_type(cls, value: str) -> str:
        if value not in (BUDGET_TOTAL, BUDGET_PER_PERSON):
            raise ValueError(f"budget_type must be '{BUDGET_TOTAL}' or '{BUDGET_PER_PERSON}'")
        return value

    @field_validator("requirements", mode="before")
    @classmethod
    def _coerce_requirements(cls, value: object) -> list[str]:
        return _coerce_string_list(value)


class PrioritiesSection(BaseModel):
    """Named priority profile with per-criterion weights."""

    profile_name: Optional[str] = None
    weights: dict[str, float] = Field(default_factory=dict)

    @field_validator("weights")
    @classmethod
    def _validate_weights(cls, value: dict[str, float]) -> dict[str, float]:
        negative = sorted(key for key, weight in value.items() if weight < 0)
        if negative:
            raise ValueError(f"weights must be non-negative: {', '.join(negative)}")
        return value


class OutputSection(BaseModel):
    directory: Optional[str] = None
    log_level: Optional[str] = None


class RunConfig(BaseModel):
    """Top-level configuration decoded from TOML."""

    profile: str = Field(default="default", description="Human label used for logging")
    title: Optional[str] = None
    search: SearchSection = Field(default_factory=SearchSection)
    priorities: PrioritiesSection = Field(default_factory=PrioritiesSection)
    output: OutputSection = Field(default_factory=OutputSection)

    @classmethod
    def load(cls, path: Path) -> "RunConfig":
        """Load a config from a TOML file."""
        if not path.exists():
            raise FileNotFoundError(f"Run config not found at {path}")
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        return cls.model_validate(data)

    # Public API -----------------------------------------------------------------

    def search_request(self) -> SearchRequest:
        search = self.search
        return SearchRequest(
            budget=search.budget,
            budget_type=search.budget_type,
            adults=search.adults,
            children=search.children,
            destination=search.destination,
            requirements=tuple(search.requirements),
        )

    def priority_weights(self) -> dict[str, float]:
        return dict(self.priorities.weights)

    def apply_to(self, settings: "EngineSettings", *, base_dir: Optional[Path] = None) -> None:
        """Apply overrides to an existing settings instance."""
        output = self.output
        if output.directory:
            settings.output_dir = _resolve_path(output.directory, base_dir)
        if output.log_level:
            settings.log_level = output.log_level


def _resolve_path(raw: str, base_dir: Optional[Path]) -> Path:
    path = Path(raw).expanduser()
    if not path.is_absolute() and base_dir:
        return (base_dir / path).resolve()
    return path


__all__ = ["RunConfig"]
