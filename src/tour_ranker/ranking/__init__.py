"""Preference scoring and card ranking."""

from .budget import filter_by_budget
from .cards import assemble_card, generate_badges, value_score
from .engine import rank_and_group, rank_offers
from .models import (
    BUDGET_PER_PERSON,
    BUDGET_TOTAL,
    CRITERIA,
    PriorityWeights,
    ScoreBreakdown,
    SearchRequest,
    resolve_weights,
)
from .scoring import score_option, weighted_total

__all__ = [
    "BUDGET_PER_PERSON",
    "BUDGET_TOTAL",
    "CRITERIA",
    "PriorityWeights",
    "ScoreBreakdown",
    "SearchRequest",
    "assemble_card",
    "filter_by_budget",
    "generate_badges",
    "rank_and_group",
    "rank_offers",
    "resolve_weights",
    "score_option",
    "value_score",
    "weighted_total",
]
