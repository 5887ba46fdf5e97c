"""Search request, priority weights and score breakdown models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from tour_ranker.utils.coerce import to_float, to_int, to_string_tuple, to_text

BUDGET_TOTAL = "total"
BUDGET_PER_PERSON = "perPerson"

CRITERIA: Tuple[str, ...] = (
    "price",
    "stars",
    "beach",
    "meal",
    "location",
    "reviews",
    "family",
    "activities",
    "quietness",
)

# Names used by stored priority profiles for the same criteria.
WEIGHT_ALIASES: Dict[str, str] = {
    "starRating": "stars",
    "beachLine": "beach",
    "mealType": "meal",
    "familyFriendly": "family",
}

PriorityWeights = Mapping[str, float]


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """The part of a user's search that scoring and filtering depend on."""

    budget: Optional[float] = None
    budget_type: str = BUDGET_TOTAL
    adults: int = 2
    children: int = 0
    destination: str = ""
    requirements: Tuple[str, ...] = ()

    @property
    def is_per_person(self) -> bool:
        return self.budget_type == BUDGET_PER_PERSON

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SearchRequest":
        budget_type = to_text(payload.get("budgetType") or payload.get("budget_type")) or BUDGET_TOTAL
        adults = to_int(payload.get("adults"))
        return cls(
            budget=to_float(payload.get("budget")),
            budget_type=budget_type,
            adults=2 if adults is None else adults,
            children=to_int(payload.get("children")) or 0,
            destination=to_text(payload.get("destination")) or "",
            requirements=to_string_tuple(payload.get("requirements")),
        )


def resolve_weights(weights: Optional[PriorityWeights]) -> Dict[str, float]:
    """Map priority weights onto score criteria.

    Alias keys are translated, unknown keys are ignored and only positive
    finite weights are kept. A criterion given under its own name takes
    precedence over its alias.
    """
    resolved: Dict[str, float] = {}
    if not weights:
        return resolved
    for key, raw in weights.items():
        criterion = WEIGHT_ALIASES.get(key, key)
        if criterion not in CRITERIA:
            continue
        weight = to_float(raw)
        if weight is None or weight <= 0:
            continue
        if criterion in resolved and key != criterion:
            continue
        resolved[criterion] = weight
    return resolved


@dataclass(slots=True)
class ScoreBreakdown:
    """Per-criterion scores in [0, 1] and the weighted ``total`` in [0, 100]."""

    price: float = 0.0
    stars: float = 0.0
    beach: float = 0.0
    meal: float = 0.0
    location: float = 0.0
    reviews: float = 0.0
    family: float = 0.0
    activities: float = 0.0
    quietness: float = 0.0
    total: float = 0.0

    def items(self) -> Iterator[Tuple[str, float]]:
        for criterion in CRITERIA:
            yield criterion, getattr(self, criterion)

    def to_dict(self) -> dict[str, float]:
        data = dict(self.items())
        data["total"] = self.total
        return data
