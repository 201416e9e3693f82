"""Pairwise match scoring between a reference item and a candidate."""

from __future__ import annotations

from typing import Optional, Sequence

from models.color_theory import colors_compatible
from models.context import RecommendationContext
from models.wardrobe_item import WardrobeItem

COLOR_POINTS = 50
OCCASION_POINTS = 30
UNWORN_POINTS = 20
BRAND_POINTS = 10


def match_score(reference: WardrobeItem, candidate: WardrobeItem, context: RecommendationContext) -> int:
    """Score how well ``candidate`` pairs with ``reference``."""

    score = 0
    if colors_compatible(reference.color, candidate.color):
        score += COLOR_POINTS
    if context.has_occasion:
        occasion = context.occasion_key
        if occasion in reference.name.lower() or occasion in candidate.name.lower():
            score += OCCASION_POINTS
    if candidate.is_unworn:
        score += UNWORN_POINTS
    if reference.brand and candidate.brand and reference.brand == candidate.brand:
        score += BRAND_POINTS
    return score


def find_best_match(
    reference: WardrobeItem,
    candidates: Sequence[WardrobeItem],
    context: RecommendationContext,
) -> Optional[WardrobeItem]:
    """Return the highest scoring candidate; the first one wins ties."""

    best: Optional[WardrobeItem] = None
    best_score = -1
    for candidate in candidates:
        score = match_score(reference, candidate, context)
        if score > best_score:
            best, best_score = candidate, score
    return best


__all__ = ["match_score", "find_best_match"]
