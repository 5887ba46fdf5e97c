"""Collapse a hotel group into one canonical ``Hotel`` and its options."""
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Sequence

from tour_ranker.config.settings import DEFAULT_SETTINGS, MAX_IMAGES, EngineSettings
from tour_ranker.offers import TourOffer
from tour_ranker.utils.coerce import number_or, round_half_up, to_float

from .models import (
    BeachInfo,
    Hotel,
    HotelDescription,
    HotelFeatures,
    HotelImage,
    HotelLocation,
    MealInfo,
    TourOption,
)
from .similarity import normalize_hotel_name

FIRST_LINE_DISTANCE_M = 100
NEAR_BEACH_DISTANCE_M = 500

COUNTRY_CODES: Dict[str, str] = {
    "Турция": "TR",
    "Египет": "EG",
    "ОАЭ": "AE",
    "Таиланд": "TH",
    "Греция": "GR",
    "Кипр": "CY",
    "Испания": "ES",
    "Италия": "IT",
    "Болгария": "BG",
    "Черногория": "ME",
}

MEAL_CODES: Dict[str, str] = {
    "без питания": "RO",
    "завтрак": "BB",
    "полупансион": "HB",
    "полный пансион": "FB",
    "все включено": "AI",
    "ультра все включено": "UAI",
}

# Checked in order; the first keyword found in the meal text decides the code.
_MEAL_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("ultra", "UAI"),
    ("ультра", "UAI"),
    ("all", "AI"),
    ("все включено", "AI"),
    ("full", "FB"),
    ("полный", "FB"),
    ("half", "HB"),
    ("полупансион", "HB"),
    ("breakfast", "BB"),
    ("завтрак", "BB"),
)

MEAL_INCLUDES: Dict[str, tuple[str, ...]] = {
    "RO": (),
    "BB": ("Завтрак",),
    "HB": ("Завтрак", "Ужин"),
    "FB": ("Завтрак", "Обед", "Ужин"),
    "AI": ("Завтрак", "Обед", "Ужин", "Напитки", "Снеки"),
    "UAI": ("Завтрак", "Обед", "Ужин", "Премиум напитки", "Снеки", "А-ля карт рестораны"),
}

DEFAULT_ROOM_NAME = "Стандартный номер"

_IMAGE_EXTENSION = re.compile(r"\.(jpg|jpeg|png)$", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def country_code(country: Optional[str]) -> str:
    return COUNTRY_CODES.get(country or "", "XX")


def meal_code(meal_type: Optional[str]) -> str:
    """Map a provider meal description to one of RO/BB/HB/FB/AI/UAI."""
    text = (meal_type or "").strip()
    if not text:
        return "RO"
    lowered = text.lower()
    if lowered in MEAL_CODES:
        return MEAL_CODES[lowered]
    if text.upper() in MEAL_INCLUDES:
        return text.upper()
    for keyword, code in _MEAL_KEYWORDS:
        if keyword in lowered:
            return code
    return "RO"


def _beach_distance(offer: TourOffer) -> Optional[float]:
    return to_float(offer.beach_distance)


def _format_distance(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def information_score(offer: TourOffer) -> int:
    return len(offer.description or "") + len(offer.images) + (10 if offer.rating else 0)


def select_primary(offers: Sequence[TourOffer]) -> TourOffer:
    """Pick the most information-rich offer; the earliest one wins ties."""
    primary = offers[0]
    best = information_score(primary)
    for offer in offers[1:]:
        score = information_score(offer)
        if score > best:
            primary, best = offer, score
    return primary


def generate_hotel_id(offer: TourOffer) -> str:
    parts = [normalize_hotel_name(offer.hotel), str(offer.stars or 0), (offer.destination or "").lower()]
    return _WHITESPACE.sub("_", "_".join(parts))


def collect_image_urls(offers: Iterable[TourOffer], limit: int) -> List[str]:
    urls: List[str] = []
    seen: set[str] = set()
    for offer in offers:
        candidates = ([offer.image] if offer.image else []) + list(offer.images)
        for url in candidates:
            if url in seen:
                continue
            seen.add(url)
            urls.append(url)
    return urls[:limit]


def _image_variant(url: str, size: str) -> str:
    return _IMAGE_EXTENSION.sub(lambda match: f"_{size}.{match.group(1)}", url)


def build_images(urls: Iterable[str], alt: str) -> tuple[HotelImage, ...]:
    return tuple(
        HotelImage(
            large=url,
            medium=_image_variant(url, "500x300"),
            thumb=_image_variant(url, "150x150"),
            alt=alt,
        )
        for url in urls
    )


def extract_highlights(offers: Sequence[TourOffer]) -> List[str]:
    highlights: List[str] = []

    distances = [distance for distance in map(_beach_distance, offers) if distance is not None]
    if any(distance < NEAR_BEACH_DISTANCE_M for distance in distances):
        closest = min(distances)
        if closest < FIRST_LINE_DISTANCE_M:
            highlights.append("Первая линия пляжа")
        else:
            highlights.append(f"{_format_distance(closest)}м до пляжа")

    if any(offer.has_wifi for offer in offers):
        highlights.append("Бесплатный Wi-Fi")
    if any(offer.has_pool for offer in offers):
        highlights.append("Бассейн")
    if any(offer.has_kids_club for offer in offers):
        highlights.append("Детский клуб")
    if any(offer.has_fitness for offer in offers):
        highlights.append("Фитнес-центр")
    if any(offer.has_aquapark for offer in offers):
        highlights.append("Аквапарк")
    return highlights


def generate_tags(offers: Sequence[TourOffer]) -> List[str]:
    tags: List[str] = []
    if any(offer.has_kids_club or offer.has_aquapark for offer in offers):
        tags.append("Семейный")
    if any((offer.stars or 0) >= 5 for offer in offers):
        tags.append("Люкс")
    distances = [distance for distance in map(_beach_distance, offers) if distance is not None]
    if any(distance < FIRST_LINE_DISTANCE_M for distance in distances):
        tags.append("Пляжный")
    if any(offer.is_hot for offer in offers):
        tags.append("Горящий тур")
    return tags


def _beach_info(offers: Sequence[TourOffer]) -> BeachInfo:
    source = next((offer for offer in offers if _beach_distance(offer) is not None), None)
    if source is None:
        return BeachInfo()
    distance = _beach_distance(source)
    return BeachInfo(
        distance=distance,
        type=source.beach_type or "sand",
        surface=source.beach_surface,
        first_line=distance < FIRST_LINE_DISTANCE_M,
    )


def merge_hotel(offers: Sequence[TourOffer], *, settings: Optional[EngineSettings] = None) -> Hotel:
    """Build the canonical hotel for a non-empty group of offers.

    Location and features come from the primary offer only; a value missing
    there is not looked up in the other offers. Images, highlights, tags,
    rating and review count aggregate over the whole group.
    """
    if not offers:
        raise ValueError("Cannot merge an empty hotel group")
    settings = settings or DEFAULT_SETTINGS
    primary = select_primary(offers)
    description = primary.description or ""

    location = HotelLocation(
        country=primary.destination,
        country_code=country_code(primary.destination),
        city=primary.arrival_city or primary.destination,
        latitude=primary.latitude,
        longitude=primary.longitude,
        airport_distance=primary.airport_distance,
        beach_distance=primary.beach_distance,
    )
    features = HotelFeatures(
        wifi=primary.has_wifi,
        pool=primary.has_pool,
        kids_club=primary.has_kids_club,
        fitness=primary.has_fitness,
        aquapark=primary.has_aquapark,
        beach=_beach_info(offers),
    )

    return Hotel(
        id=generate_hotel_id(primary),
        name=primary.hotel,
        stars=primary.stars or 0,
        location=location,
        images=build_images(collect_image_urls(offers, min(settings.max_images, MAX_IMAGES)), primary.hotel),
        description=HotelDescription(
            short=description[: settings.short_description_length],
            full=description,
            highlights=tuple(extract_highlights(offers)),
        ),
        rating=max(number_or(offer.rating, 0.0) for offer in offers),
        reviews_count=sum(int(number_or(offer.reviews_count, 0)) for offer in offers),
        features=features,
        tags=tuple(generate_tags(offers)),
    )


def offer_to_option(offer: TourOffer, *, settings: Optional[EngineSettings] = None) -> TourOption:
    settings = settings or DEFAULT_SETTINGS
    price = number_or(offer.price, 0.0)
    code = meal_code(offer.meal_type)
    includes = tuple(item for item in ("Перелет", "Проживание", offer.meal_type) if item)
    return TourOption(
        id=offer.external_id,
        provider=offer.provider,
        tour_operator=offer.tour_operator or offer.provider,
        price=price,
        price_old=offer.price_old,
        currency=settings.currency,
        price_per_person=round_half_up(price / 2),
        price_includes=includes,
        start_date=offer.start_date,
        end_date=offer.end_date,
        nights=offer.nights or 0,
        room_name=offer.room_type or DEFAULT_ROOM_NAME,
        meal=MealInfo(code=code, name=offer.meal_type, included=MEAL_INCLUDES[code]),
        transfer=offer.transfer_included,
        insurance=offer.insurance_included,
        instant_confirm=offer.instant_confirm,
        is_hot=offer.is_hot,
        booking_link=offer.link,
        availability=offer.availability or "available",
    )
