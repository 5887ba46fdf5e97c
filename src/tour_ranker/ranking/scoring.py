"""Per-offer preference scoring.

Every criterion yields a score in [0, 1]; the weighted average of the criteria
present in the user's priority weights gives the 0-100 match score. All inputs
are read leniently: missing or non-numeric fields fall back to neutral
defaults rather than raising.
"""
from __future__ import annotations

from typing import Optional, Sequence

from tour_ranker.offers import TourOffer
from tour_ranker.utils.coerce import number_or, to_float

from .models import PriorityWeights, ScoreBreakdown, SearchRequest, resolve_weights

OPTIMAL_MIN_RATIO = 0.7
OPTIMAL_MAX_RATIO = 0.9

ALL_INCLUSIVE_REQUIREMENT = "all_inclusive"

# Checked in order; the first keyword found in the meal text wins.
MEAL_SCORES: tuple[tuple[str, float], ...] = (
    ("ultra", 1.0),
    ("ультра", 1.0),
    ("all", 0.9),
    ("все включено", 0.9),
    ("full", 0.7),
    ("полный пансион", 0.7),
    ("half", 0.6),
    ("полупансион", 0.6),
    ("breakfast", 0.5),
    ("завтрак", 0.5),
    ("bb", 0.5),
    ("ro", 0.3),
    ("без питания", 0.2),
)


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _text(value: Optional[str]) -> str:
    return (value or "").lower()


def _is_all_inclusive(meal_type: Optional[str]) -> bool:
    meal = _text(meal_type)
    return "all" in meal or "все включено" in meal


def price_score(price: Optional[float], budget: Optional[float], budget_type: Optional[str]) -> float:
    """Favour prices in the 70-90% band of the effective budget.

    The effective budget is the budget itself for per-person requests and half
    of it otherwise, assuming a party of two regardless of the real head count.
    """
    budget_value = to_float(budget)
    if budget_value is None:
        return 0.5
    effective_budget = budget_value if budget_type == "perPerson" else budget_value / 2
    price_value = number_or(price, 0.0)
    if price_value > effective_budget:
        return 0.0

    optimal_min = effective_budget * OPTIMAL_MIN_RATIO
    optimal_max = effective_budget * OPTIMAL_MAX_RATIO
    if optimal_min <= price_value <= optimal_max:
        return 1.0
    if price_value < optimal_min:
        if optimal_min <= 0:
            return 0.0
        return _clamp(0.5 + (price_value / optimal_min) * 0.5)
    return 0.9


def stars_score(stars: Optional[float]) -> float:
    return _clamp(number_or(stars, 0.0) / 5)


def beach_score(offer: TourOffer) -> float:
    score = 0.5
    beach_line = to_float(offer.beach_line)
    if beach_line:
        score = max(0.0, 1 - (beach_line - 1) * 0.25)

    beach_type = _text(offer.beach_type)
    if "sand" in beach_type or "песча" in beach_type:
        score += 0.1

    distance = to_float(offer.beach_distance)
    if distance is not None:
        if distance <= 100:
            score += 0.1
        elif distance > 500:
            score -= 0.2
    return _clamp(score)


def meal_score(meal_type: Optional[str], requirements: Sequence[str] = ()) -> float:
    meal = _text(meal_type)
    if not meal:
        return 0.5
    if ALL_INCLUSIVE_REQUIREMENT in (requirements or ()):
        return 1.0 if _is_all_inclusive(meal) else 0.3
    for keyword, score in MEAL_SCORES:
        if keyword in meal:
            return score
    return 0.5


def location_score(offer: TourOffer) -> float:
    score = 0.5
    airport = to_float(offer.airport_distance)
    if airport is not None:
        if airport <= 30:
            score += 0.2
        elif airport > 100:
            score -= 0.1
    if offer.has_coordinates:
        score += 0.1
    return _clamp(score)


def reviews_score(rating: Optional[float]) -> float:
    value = to_float(rating)
    if not value:
        return 0.5
    return _clamp(value / 5)


def family_score(offer: TourOffer, request: SearchRequest) -> float:
    if number_or(request.children, 0) <= 0:
        return 0.5
    score = 0.3
    if offer.has_kids_club:
        score += 0.3
    if offer.has_aquapark:
        score += 0.2
    if offer.has_pool:
        score += 0.1
    if _is_all_inclusive(offer.meal_type):
        score += 0.1
    return _clamp(score)


def activities_score(offer: TourOffer) -> float:
    score = 0.3
    if offer.has_aquapark:
        score += 0.2
    if offer.has_fitness:
        score += 0.1
    if offer.has_pool:
        score += 0.1
    if offer.has_wifi:
        score += 0.1
    airport = to_float(offer.airport_distance)
    if airport is not None and airport <= 50:
        score += 0.1
    if "анимация" in _text(offer.description):
        score += 0.1
    return _clamp(score)


def quietness_score(offer: TourOffer, request: SearchRequest) -> float:
    score = 0.7
    description = _text(offer.description)
    if offer.has_aquapark:
        score -= 0.2
    if offer.has_kids_club:
        score -= 0.1
    if "анимация" in description:
        score -= 0.2
    if "дискотека" in description:
        score -= 0.2
    if "тихий" in description:
        score += 0.2
    if "уединенный" in description:
        score += 0.2
    if number_or(request.adults, 0) > 0 and number_or(request.children, 0) <= 0:
        score += 0.1
    airport = to_float(offer.airport_distance)
    if airport is not None and airport > 70:
        score += 0.1
    return _clamp(score)


def weighted_total(breakdown: ScoreBreakdown, weights: Optional[PriorityWeights]) -> float:
    """Weighted average of the criteria that carry a weight, scaled to 0-100."""
    resolved = resolve_weights(weights)
    total_weight = sum(resolved.values())
    if total_weight <= 0:
        return 0.0
    weighted = sum(weight * getattr(breakdown, criterion) for criterion, weight in resolved.items())
    return _clamp(weighted / total_weight * 100, 0.0, 100.0)


def score_option(
    offer: TourOffer,
    request: SearchRequest,
    weights: Optional[PriorityWeights],
) -> ScoreBreakdown:
    breakdown = ScoreBreakdown(
        price=price_score(offer.price, request.budget, request.budget_type),
        stars=stars_score(offer.stars),
        beach=beach_score(offer),
        meal=meal_score(offer.meal_type, request.requirements),
        location=location_score(offer),
        reviews=reviews_score(offer.rating),
        family=family_score(offer, request),
        activities=activities_score(offer),
        quietness=quietness_score(offer, request),
    )
    breakdown.total = weighted_total(breakdown, weights)
    return breakdown
