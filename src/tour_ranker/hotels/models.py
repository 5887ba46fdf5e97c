"""Dataclasses for merged hotels, bookable options and ranked cards."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional


@dataclass(frozen=True, slots=True)
class HotelImage:
    large: str
    medium: str
    thumb: str
    alt: str

    def to_dict(self) -> dict[str, object]:
        return {"thumb": self.thumb, "medium": self.medium, "large": self.large, "alt": self.alt}


@dataclass(frozen=True, slots=True)
class HotelLocation:
    country: str
    country_code: str
    city: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    airport_distance: Optional[float] = None
    beach_distance: Optional[float] = None

    def to_dict(self) -> dict[str, object]:
        return {
            "country": self.country,
            "country_code": self.country_code,
            "city": self.city,
            "coordinates": {"lat": self.latitude, "lng": self.longitude},
            "distances": {"airport": self.airport_distance, "beach": self.beach_distance},
        }


@dataclass(frozen=True, slots=True)
class HotelDescription:
    short: str = ""
    full: str = ""
    highlights: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {"short": self.short, "full": self.full, "highlights": list(self.highlights)}


@dataclass(frozen=True, slots=True)
class BeachInfo:
    distance: float = 1000
    type: str = "sand"
    surface: Optional[str] = None
    first_line: bool = False
    private: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "distance": self.distance,
            "type": self.type,
            "surface": self.surface,
            "first_line": self.first_line,
            "private": self.private,
        }


@dataclass(frozen=True, slots=True)
class HotelFeatures:
    wifi: bool = False
    pool: bool = False
    kids_club: bool = False
    fitness: bool = False
    aquapark: bool = False
    beach: BeachInfo = field(default_factory=BeachInfo)

    def to_dict(self) -> dict[str, object]:
        return {
            "wifi": self.wifi,
            "pool": self.pool,
            "kids_club": self.kids_club,
            "fitness": self.fitness,
            "aquapark": self.aquapark,
            "beach": self.beach.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class Hotel:
    """Canonical hotel identity merged from every offer in a group."""

    id: str
    name: str
    stars: int
    location: HotelLocation
    images: tuple[HotelImage, ...] = ()
    description: HotelDescription = field(default_factory=HotelDescription)
    rating: float = 0.0
    reviews_count: int = 0
    features: HotelFeatures = field(default_factory=HotelFeatures)
    tags: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "stars": self.stars,
            "location": self.location.to_dict(),
            "images": [image.to_dict() for image in self.images],
            "description": self.description.to_dict(),
            "rating": {"overall": self.rating},
            "reviews": {"count": self.reviews_count, "score": self.rating},
            "features": self.features.to_dict(),
            "tags": list(self.tags),
        }


@dataclass(frozen=True, slots=True)
class MealInfo:
    code: str
    name: str
    included: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {"code": self.code, "name": self.name, "included": list(self.included)}


@dataclass(frozen=True, slots=True)
class TourOption:
    """A bookable instance derived one-to-one from a surviving offer."""

    id: Optional[str]
    provider: str
    tour_operator: str
    price: float
    price_old: Optional[float]
    currency: str
    price_per_person: int
    price_includes: tuple[str, ...]
    start_date: Optional[date]
    end_date: Optional[date]
    nights: int
    room_name: str
    meal: MealInfo
    transfer: bool = True
    insurance: bool = False
    instant_confirm: bool = False
    is_hot: bool = False
    booking_link: str = ""
    availability: str = "available"

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "provider": self.provider,
            "tour_operator": self.tour_operator,
            "price": self.price,
            "price_old": self.price_old,
            "currency": self.currency,
            "price_per_person": self.price_per_person,
            "price_includes": list(self.price_includes),
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "nights": self.nights,
            "room": {"name": self.room_name},
            "meal": self.meal.to_dict(),
            "transfer": self.transfer,
            "insurance": self.insurance,
            "instant_confirm": self.instant_confirm,
            "is_hot": self.is_hot,
            "booking_link": self.booking_link,
            "availability": self.availability,
        }


@dataclass(frozen=True, slots=True)
class PriceRange:
    min: float
    max: float
    currency: str

    def to_dict(self) -> dict[str, object]:
        return {"min": self.min, "max": self.max, "currency": self.currency}


@dataclass(frozen=True, slots=True)
class Badge:
    type: str
    text: str
    color: str

    def to_dict(self) -> dict[str, object]:
        return {"type": self.type, "text": self.text, "color": self.color}


@dataclass(frozen=True, slots=True)
class TourCard:
    """Final output unit: one hotel, its options and the picks among them."""

    hotel: Hotel
    options: tuple[TourOption, ...]
    price_range: PriceRange
    best_price: TourOption
    best_value: TourOption
    recommended: TourOption
    match_score: float
    badges: tuple[Badge, ...] = ()

    @property
    def badge_types(self) -> List[str]:
        return [badge.type for badge in self.badges]

    def to_dict(self) -> dict[str, object]:
        return {
            "hotel": self.hotel.to_dict(),
            "options": [option.to_dict() for option in self.options],
            "price_range": self.price_range.to_dict(),
            "best_price": self.best_price.to_dict(),
            "best_value": self.best_value.to_dict(),
            "recommended": self.recommended.to_dict(),
            "match_score": self.match_score,
            "badges": [badge.to_dict() for badge in self.badges],
        }

    @classmethod
    def from_iterable(cls, cards: Iterable["TourCard"]) -> List[dict[str, object]]:
        return [card.to_dict() for card in cards]
