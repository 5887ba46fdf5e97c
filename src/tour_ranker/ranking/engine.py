"""Entry points combining filtering, scoring, grouping and card assembly."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from tour_ranker.config.settings import DEFAULT_SETTINGS, EngineSettings
from tour_ranker.hotels.grouping import group_offers
from tour_ranker.hotels.models import TourCard
from tour_ranker.offers import TourOffer

from .budget import filter_by_budget
from .cards import assemble_card
from .models import PriorityWeights, ScoreBreakdown, SearchRequest
from .scoring import score_option

logger = logging.getLogger(__name__)


def rank_offers(
    offers: Sequence[TourOffer],
    request: SearchRequest,
    weights: Optional[PriorityWeights],
    *,
    settings: Optional[EngineSettings] = None,
) -> List[Tuple[TourOffer, ScoreBreakdown]]:
    """Budget-filter and score offers, best match first, without grouping."""
    settings = settings or DEFAULT_SETTINGS
    kept = filter_by_budget(offers, request, settings=settings)
    ranked = [(offer, score_option(offer, request, weights)) for offer in kept]
    ranked.sort(key=lambda item: item[1].total, reverse=True)
    return ranked


def rank_and_group(
    offers: Sequence[TourOffer],
    request: SearchRequest,
    weights: Optional[PriorityWeights],
    *,
    settings: Optional[EngineSettings] = None,
) -> List[TourCard]:
    """Turn a flat batch of provider offers into ranked hotel cards.

    Offers outside the budget window are dropped, the rest are scored and
    grouped by hotel in input order. Each group becomes one card whose match
    score is the score of the group's seed offer. Cards are returned best match
    first; equal scores keep group order.
    """
    settings = settings or DEFAULT_SETTINGS
    kept = filter_by_budget(offers, request, settings=settings)
    scores = {id(offer): score_option(offer, request, weights) for offer in kept}

    cards = [
        assemble_card(group.offers, scores[id(group.seed)].total, settings=settings)
        for group in group_offers(kept, settings=settings)
    ]
    cards.sort(key=lambda card: card.match_score, reverse=True)

    logger.info(
        "Ranked %d offers (%d within budget) into %d hotel cards; top score %s",
        len(offers),
        len(kept),
        len(cards),
        f"{cards[0].match_score:.2f}" if cards else "n/a",
    )
    return cards
