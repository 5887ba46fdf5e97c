"""Budget pre-filter applied before grouping."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from tour_ranker.config.settings import DEFAULT_SETTINGS, EngineSettings
from tour_ranker.offers import TourOffer
from tour_ranker.utils.coerce import number_or, to_float

from .models import SearchRequest

logger = logging.getLogger(__name__)


def filter_price(offer: TourOffer, request: SearchRequest, settings: EngineSettings) -> float:
    """Price compared against the budget.

    Per-person requests multiply the offer price by the adult count. This is a
    different reading of ``perPerson`` than the price score uses, which keeps
    the budget as-is and does not look at the party size.
    """
    price = number_or(offer.price, 0.0)
    if not request.is_per_person:
        return price
    adults = int(number_or(request.adults, 0)) or settings.default_adults
    return price * adults


def filter_by_budget(
    offers: Sequence[TourOffer],
    request: SearchRequest,
    *,
    settings: Optional[EngineSettings] = None,
) -> List[TourOffer]:
    """Keep offers whose filter price lies within ``[floor_ratio * budget, budget]``.

    Without a budget every offer is kept.
    """
    settings = settings or DEFAULT_SETTINGS
    budget = to_float(request.budget)
    if budget is None:
        return list(offers)

    floor = budget * settings.budget_floor_ratio
    kept: List[TourOffer] = []
    for offer in offers:
        price = filter_price(offer, request, settings)
        if floor <= price <= budget:
            kept.append(offer)
        else:
            logger.debug(
                "Dropping %r from %s: price %.0f outside budget window %.0f-%.0f",
                offer.hotel,
                offer.provider or "unknown provider",
                price,
                floor,
                budget,
            )
    return kept
