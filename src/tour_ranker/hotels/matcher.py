"""Pairwise decision whether two offers describe the same physical hotel."""
from __future__ import annotations

from dataclasses import dataclass

from tour_ranker.offers import TourOffer

from .similarity import geo_distance_km, normalize_hotel_name, similarity

COORDINATES_MATCH = "coordinates_match"
EXACT_NAME_MATCH = "exact_name_match"
HIGH_SIMILARITY = "high_similarity"
MEDIUM_SIMILARITY_WITH_FEATURES = "medium_similarity_with_features"
NO_MATCH = "no_match"

MAX_COORDINATE_DISTANCE_KM = 0.5
MAX_BEACH_DISTANCE_DELTA_M = 100


@dataclass(frozen=True, slots=True)
class HotelMatch:
    confidence: float
    reason: str

    @property
    def matched(self) -> bool:
        return self.confidence > 0


_NO_MATCH = HotelMatch(confidence=0.0, reason=NO_MATCH)


def _same_stars(first: TourOffer, second: TourOffer) -> bool:
    # A missing star rating never equals anything, including another missing one.
    return first.stars is not None and first.stars == second.stars


def _same_city(first: TourOffer, second: TourOffer) -> bool:
    if first.destination and first.destination == second.destination:
        return True
    return bool(first.arrival_city) and first.arrival_city == second.arrival_city


def _beach_distances_close(first: TourOffer, second: TourOffer) -> bool:
    if first.beach_distance is None or second.beach_distance is None:
        return False
    return abs(first.beach_distance - second.beach_distance) < MAX_BEACH_DISTANCE_DELTA_M


def is_matching_hotel(first: TourOffer, second: TourOffer) -> HotelMatch:
    """Return the confidence that both offers are the same hotel.

    Rules are checked in priority order and the first one that applies wins:
    nearby coordinates with a loosely similar name, identical normalised names,
    a very similar name in the same city with the same stars, and finally a
    similar name backed by a matching beach distance.
    """
    name_similarity = similarity(first.hotel, second.hotel)

    if first.has_coordinates and second.has_coordinates:
        distance = geo_distance_km(first.latitude, first.longitude, second.latitude, second.longitude)
        if distance < MAX_COORDINATE_DISTANCE_KM and name_similarity > 0.5:
            return HotelMatch(confidence=0.95, reason=COORDINATES_MATCH)

    if normalize_hotel_name(first.hotel) == normalize_hotel_name(second.hotel):
        return HotelMatch(confidence=0.9, reason=EXACT_NAME_MATCH)

    same_stars = _same_stars(first, second)
    same_city = _same_city(first, second)

    if name_similarity > 0.8 and same_stars and same_city:
        return HotelMatch(confidence=0.85, reason=HIGH_SIMILARITY)

    if name_similarity > 0.7 and same_stars and same_city and _beach_distances_close(first, second):
        return HotelMatch(confidence=0.75, reason=MEDIUM_SIMILARITY_WITH_FEATURES)

    return _NO_MATCH
