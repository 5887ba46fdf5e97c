"""Assemble ranked, badge-annotated tour cards from hotel groups."""
from __future__ import annotations

from typing import List, Optional, Sequence

from tour_ranker.config.settings import DEFAULT_SETTINGS, EngineSettings
from tour_ranker.hotels.merger import merge_hotel, offer_to_option
from tour_ranker.hotels.models import Badge, PriceRange, TourCard, TourOption
from tour_ranker.offers import TourOffer
from tour_ranker.utils.coerce import round_half_up

HOT_BADGE = ("hot", "Горящий тур", "#ff4444")
DISCOUNT_COLOR = "#44ff44"
EXCLUSIVE_BADGE = ("exclusive", "Моментальное подтверждение", "#4444ff")


def value_score(option: TourOption) -> float:
    """Price/value heuristic: cheaper is better, included services add a bonus."""
    score = 100 / (option.price / 10000) if option.price > 0 else 0.0
    if option.meal.code in ("AI", "UAI"):
        score += 20
    if option.meal.code == "FB":
        score += 10
    if option.transfer:
        score += 10
    if option.insurance:
        score += 5
    if option.instant_confirm:
        score += 15
    return score


def find_best_value(options: Sequence[TourOption]) -> TourOption:
    best = options[0]
    best_score = value_score(best)
    for option in options[1:]:
        score = value_score(option)
        if score > best_score:
            best, best_score = option, score
    return best


def find_recommended(options: Sequence[TourOption]) -> TourOption:
    # Same pick as best value until user preferences feed into it.
    return find_best_value(options)


def max_discount_percent(options: Sequence[TourOption]) -> Optional[int]:
    discounts = [
        round_half_up((1 - option.price / option.price_old) * 100)
        for option in options
        if option.price_old and option.price_old > option.price
    ]
    return max(discounts) if discounts else None


def generate_badges(options: Sequence[TourOption]) -> List[Badge]:
    badges: List[Badge] = []
    if any(option.is_hot for option in options):
        badges.append(Badge(*HOT_BADGE))

    discount = max_discount_percent(options)
    if discount is not None:
        badges.append(Badge(type="discount", text=f"-{discount}%", color=DISCOUNT_COLOR))

    if options and all(option.instant_confirm for option in options):
        badges.append(Badge(*EXCLUSIVE_BADGE))
    return badges


def assemble_card(
    offers: Sequence[TourOffer],
    match_score: float,
    *,
    settings: Optional[EngineSettings] = None,
) -> TourCard:
    """Build the card for one non-empty hotel group."""
    settings = settings or DEFAULT_SETTINGS
    hotel = merge_hotel(offers, settings=settings)
    options = sorted((offer_to_option(offer, settings=settings) for offer in offers), key=lambda option: option.price)

    best_price = options[0]
    return TourCard(
        hotel=hotel,
        options=tuple(options),
        price_range=PriceRange(min=best_price.price, max=options[-1].price, currency=settings.currency),
        best_price=best_price,
        best_value=find_best_value(options),
        recommended=find_recommended(options),
        match_score=match_score,
        badges=tuple(generate_badges(options)),
    )
