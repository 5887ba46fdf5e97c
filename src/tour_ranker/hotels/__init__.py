"""Hotel matching, grouping and merging."""

from .grouping import HotelGroup, group_offers
from .matcher import HotelMatch, is_matching_hotel
from .merger import merge_hotel, offer_to_option
from .models import (
    Badge,
    Hotel,
    HotelDescription,
    HotelFeatures,
    HotelImage,
    HotelLocation,
    MealInfo,
    PriceRange,
    TourCard,
    TourOption,
)
from .similarity import geo_distance_km, normalize_hotel_name, similarity

__all__ = [
    "Badge",
    "Hotel",
    "HotelDescription",
    "HotelFeatures",
    "HotelGroup",
    "HotelImage",
    "HotelLocation",
    "HotelMatch",
    "MealInfo",
    "PriceRange",
    "TourCard",
    "TourOption",
    "geo_distance_km",
    "group_offers",
    "is_matching_hotel",
    "merge_hotel",
    "normalize_hotel_name",
    "offer_to_option",
    "similarity",
]
