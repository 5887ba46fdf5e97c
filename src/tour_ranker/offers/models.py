"""Dataclass for a single normalised provider tour offer."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class TourOffer:
    """One bookable package as delivered by an upstream provider.

    Offers never reference each other; which offers describe the same hotel is
    inferred later by the matcher.
    """

    provider: str = ""
    hotel: str = ""
    destination: str = ""
    arrival_city: Optional[str] = None
    external_id: Optional[str] = None
    tour_operator: Optional[str] = None
    stars: Optional[int] = None
    price: float = 0.0
    price_old: Optional[float] = None
    nights: int = 0
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    meal_type: str = ""
    room_type: Optional[str] = None
    beach_line: Optional[int] = None
    beach_distance: Optional[float] = None
    beach_type: Optional[str] = None
    beach_surface: Optional[str] = None
    airport_distance: Optional[float] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    rating: Optional[float] = None
    reviews_count: int = 0
    image: Optional[str] = None
    images: tuple[str, ...] = ()
    has_wifi: bool = False
    has_pool: bool = False
    has_kids_club: bool = False
    has_fitness: bool = False
    has_aquapark: bool = False
    instant_confirm: bool = False
    is_hot: bool = False
    transfer_included: bool = True
    insurance_included: bool = False
    availability: str = "available"
    description: str = ""
    link: str = ""
    raw: dict[str, Any] = field(default_factory=dict, compare=False, hash=False, repr=False)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "provider": self.provider,
            "hotel": self.hotel,
            "destination": self.destination,
            "arrival_city": self.arrival_city,
            "external_id": self.external_id,
            "tour_operator": self.tour_operator,
            "stars": self.stars,
            "price": self.price,
            "price_old": self.price_old,
            "nights": self.nights,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "meal_type": self.meal_type,
            "room_type": self.room_type,
            "beach_line": self.beach_line,
            "beach_distance": self.beach_distance,
            "beach_type": self.beach_type,
            "beach_surface": self.beach_surface,
            "airport_distance": self.airport_distance,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "rating": self.rating,
            "reviews_count": self.reviews_count,
            "image": self.image,
            "images": list(self.images),
            "has_wifi": self.has_wifi,
            "has_pool": self.has_pool,
            "has_kids_club": self.has_kids_club,
            "has_fitness": self.has_fitness,
            "has_aquapark": self.has_aquapark,
            "instant_confirm": self.instant_confirm,
            "is_hot": self.is_hot,
            "transfer_included": self.transfer_included,
            "insurance_included": self.insurance_included,
            "availability": self.availability,
            "description": self.description,
            "link": self.link,
        }
