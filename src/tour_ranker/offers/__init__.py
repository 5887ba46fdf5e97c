"""Tour offer model and provider payload normalisation."""

from .models import TourOffer
from .normalizer import build_tour_offer, build_tour_offers

__all__ = [
    "TourOffer",
    "build_tour_offer",
    "build_tour_offers",
]
