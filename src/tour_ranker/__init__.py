"""Hotel deduplication and preference ranking for aggregated tour offers."""

from .offers import TourOffer, build_tour_offer, build_tour_offers
from .ranking import (
    ScoreBreakdown,
    SearchRequest,
    rank_and_group,
    rank_offers,
    score_option,
)

__all__ = [
    "ScoreBreakdown",
    "SearchRequest",
    "TourOffer",
    "build_tour_offer",
    "build_tour_offers",
    "rank_and_group",
    "rank_offers",
    "score_option",
]
