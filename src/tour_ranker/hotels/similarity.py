"""Name normalisation, string similarity and geodesic distance helpers."""
from __future__ import annotations

import math
import re

from rapidfuzz.distance import Levenshtein

EARTH_RADIUS_KM = 6371.0

_WHITESPACE = re.compile(r"\s+")
# Tokens are removed wherever they occur, including inside longer words.
_MARKETING_TOKENS = re.compile(r"hotel|отель|resort|резорт|spa|спа", re.IGNORECASE)
_DISALLOWED = re.compile(r"[^a-z0-9\s\u0400-\u04ff]")


def normalize_hotel_name(name: str | None) -> str:
    """Reduce a provider hotel name to a comparable key.

    >>> normalize_hotel_name("RIXOS PREMIUM BELEK RESORT")
    'rixos premium belek'
    """
    if not name:
        return ""
    text = _WHITESPACE.sub(" ", name.lower())
    text = _MARKETING_TOKENS.sub("", text)
    text = _DISALLOWED.sub("", text)
    return text.strip()


def similarity(first: str | None, second: str | None) -> float:
    """Edit-distance ratio ``1 - levenshtein / max(len)`` on case-folded input."""
    left = (first or "").lower().strip()
    right = (second or "").lower().strip()
    if left == right:
        return 1.0
    if not left or not right:
        return 0.0
    distance = Levenshtein.distance(left, right)
    return 1.0 - distance / max(len(left), len(right))


def geo_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle (haversine) distance in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
