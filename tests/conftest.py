from __future__ import annotations

from typing import Any

import pytest

from tour_ranker.offers import TourOffer


@pytest.fixture
def make_offer():
    def _make(**overrides: Any) -> TourOffer:
        fields: dict[str, Any] = {
            "provider": "leveltravel",
            "hotel": "Rixos Premium Belek",
            "destination": "Турция",
            "arrival_city": "Анталья",
            "stars": 5,
            "price": 150000.0,
            "nights": 7,
            "meal_type": "Все включено",
            "link": "https://example.com/tour/1",
        }
        fields.update(overrides)
        return TourOffer(**fields)

    return _make
