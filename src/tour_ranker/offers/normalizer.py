"""Utilities to turn raw provider tour payloads into ``TourOffer`` instances."""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from tour_ranker.utils.coerce import (
    to_bool,
    to_date,
    to_float,
    to_int,
    to_string_tuple,
    to_text,
)

from .models import TourOffer

logger = logging.getLogger(__name__)


def _pick(payload: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def _flag_or(value: Any, default: bool) -> bool:
    if value is None:
        return default
    return to_bool(value)


def _extract_images(payload: Mapping[str, Any]) -> tuple[Optional[str], tuple[str, ...]]:
    image = to_text(_pick(payload, "image", "photoUrl", "photo_url"))
    images = to_string_tuple(_pick(payload, "images", "photos"))
    return image, images


def build_tour_offer(payload: Mapping[str, Any]) -> TourOffer:
    """Build a ``TourOffer`` from a provider payload.

    Both the providers' camelCase keys and snake_case keys are accepted. Missing,
    null or non-numeric values fall back to the model defaults instead of
    raising.
    """
    image, images = _extract_images(payload)
    provider = to_text(payload.get("provider")) or ""
    return TourOffer(
        provider=provider,
        hotel=to_text(_pick(payload, "hotel", "hotelName", "hotel_name")) or "",
        destination=to_text(_pick(payload, "destination", "country")) or "",
        arrival_city=to_text(_pick(payload, "arrivalCity", "arrival_city", "resort")),
        external_id=to_text(_pick(payload, "externalId", "external_id", "id")),
        tour_operator=to_text(_pick(payload, "tourOperatorId", "tourOperator", "tour_operator")),
        stars=to_int(_pick(payload, "hotelStars", "stars", "hotel_stars")),
        price=to_float(payload.get("price")) or 0.0,
        price_old=to_float(_pick(payload, "priceOld", "price_old")),
        nights=to_int(_pick(payload, "nights", "duration")) or 0,
        start_date=to_date(_pick(payload, "startDate", "start_date")),
        end_date=to_date(_pick(payload, "endDate", "end_date")),
        meal_type=to_text(_pick(payload, "mealType", "meal_type")) or "",
        room_type=to_text(_pick(payload, "roomType", "room_type")),
        beach_line=to_int(_pick(payload, "beachLine", "beach_line")),
        beach_distance=to_float(_pick(payload, "beachDistance", "beach_distance")),
        beach_type=to_text(_pick(payload, "beachType", "beach_type")),
        beach_surface=to_text(_pick(payload, "beachSurface", "beach_surface")),
        airport_distance=to_float(_pick(payload, "airportDistance", "airport_distance")),
        latitude=to_float(_pick(payload, "latitude", "lat")),
        longitude=to_float(_pick(payload, "longitude", "lng", "lon")),
        rating=to_float(payload.get("rating")),
        reviews_count=to_int(_pick(payload, "reviewsCount", "reviews_count")) or 0,
        image=image,
        images=images,
        has_wifi=to_bool(_pick(payload, "hasWifi", "has_wifi", "wifi")),
        has_pool=to_bool(_pick(payload, "hasPool", "has_pool", "pool")),
        has_kids_club=to_bool(_pick(payload, "hasKidsClub", "has_kids_club", "kidsClub")),
        has_fitness=to_bool(_pick(payload, "hasFitness", "has_fitness", "fitness")),
        has_aquapark=to_bool(_pick(payload, "hasAquapark", "has_aquapark", "aquapark")),
        instant_confirm=to_bool(_pick(payload, "instantConfirm", "instant_confirm")),
        is_hot=to_bool(_pick(payload, "isHot", "is_hot")),
        transfer_included=_flag_or(_pick(payload, "transfer", "transferIncluded", "transfer_included"), True),
        insurance_included=to_bool(_pick(payload, "insurance", "insuranceIncluded", "insurance_included")),
        availability=to_text(payload.get("availability")) or "available",
        description=to_text(payload.get("description")) or "",
        link=to_text(_pick(payload, "link", "bookingLink", "booking_link")) or "",
        raw=dict(payload),
    )


def build_tour_offers(payloads: Iterable[Any]) -> List[TourOffer]:
    offers: List[TourOffer] = []
    for index, payload in enumerate(payloads):
        if not isinstance(payload, Mapping):
            logger.debug("Skipping offer payload %d: expected a mapping, got %s", index, type(payload).__name__)
            continue
        offers.append(build_tour_offer(payload))
    return offers
