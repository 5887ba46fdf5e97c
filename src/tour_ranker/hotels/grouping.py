"""Seed-based partitioning of offers into hotel groups."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from tour_ranker.config.settings import DEFAULT_SETTINGS, EngineSettings
from tour_ranker.offers import TourOffer

from .matcher import is_matching_hotel

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HotelGroup:
    """Offers judged to describe one physical hotel; lives for a single search."""

    offers: List[TourOffer] = field(default_factory=list)

    @property
    def seed(self) -> TourOffer:
        return self.offers[0]

    def __len__(self) -> int:
        return len(self.offers)


def group_offers(
    offers: Sequence[TourOffer],
    *,
    settings: Optional[EngineSettings] = None,
) -> List[HotelGroup]:
    """Partition ``offers`` into hotel groups.

    Each unassigned offer, in input order, seeds a new group and pulls in every
    later unassigned offer that matches the seed. Candidates are compared with
    the seed only, never with other members, so the result is not a transitive
    closure.
    """
    settings = settings or DEFAULT_SETTINGS
    assigned = [False] * len(offers)
    groups: List[HotelGroup] = []

    for index, seed in enumerate(offers):
        if assigned[index]:
            continue
        assigned[index] = True
        group = HotelGroup(offers=[seed])

        for other_index in range(index + 1, len(offers)):
            if assigned[other_index]:
                continue
            candidate = offers[other_index]
            match = is_matching_hotel(seed, candidate)
            if match.confidence > settings.match_threshold:
                group.offers.append(candidate)
                assigned[other_index] = True
                logger.info(
                    "Hotel match found: %r ~ %r (confidence=%.2f, reason=%s)",
                    seed.hotel,
                    candidate.hotel,
                    match.confidence,
                    match.reason,
                )

        groups.append(group)
    return groups
