"""Candidate outfit assembly using ordered strategies with diagnostics."""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from logic.match_scoring import find_best_match
from models.color_theory import colors_compatible
from models.context import RecommendationContext
from models.taxonomy import Category
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

OutfitCandidate = List[WardrobeItem]

DEFAULT_MAX_COMBINATIONS = 10
DRESS_LAYER_BELOW_F = 60
SEPARATES_LAYER_BELOW_F = 65
FALLBACK_SIZES = (2, 3)


@dataclass(frozen=True)
class GenerationResult:
    candidates: List[OutfitCandidate]
    diagnostics: Dict[str, object]


def _unique_by_id(items: Sequence[Optional[WardrobeItem]]) -> OutfitCandidate:
    seen = set()
    unique: OutfitCandidate = []
    for item in items:
        if item is None or item.id in seen:
            continue
        seen.add(item.id)
        unique.append(item)
    return unique


def _colder_than(context: RecommendationContext, threshold: float) -> bool:
    return context.weather is not None and context.weather.temperature < threshold


def _dress_outfits(
    grouped: Mapping[Category, List[WardrobeItem]],
    context: RecommendationContext,
    max_combinations: int,
) -> List[OutfitCandidate]:
    dresses = grouped.get(Category.DRESS, [])
    shoes = grouped.get(Category.SHOES, [])
    outerwear = grouped.get(Category.OUTERWEAR, [])
    outfits: List[OutfitCandidate] = []
    if not dresses or not shoes:
        return outfits

    for dress in dresses[: math.ceil(max_combinations / 2)]:
        if len(outfits) >= max_combinations:
            break
        shoe = find_best_match(dress, shoes, context)
        if shoe is None:
            continue
        combo: List[Optional[WardrobeItem]] = [dress, shoe]
        if _colder_than(context, DRESS_LAYER_BELOW_F) and outerwear:
            combo.append(find_best_match(dress, outerwear, context))
        outfits.append(_unique_by_id(combo))
    return outfits


def _separates_outfits(
    grouped: Mapping[Category, List[WardrobeItem]],
    context: RecommendationContext,
    limit: int,
) -> List[OutfitCandidate]:
    tops = grouped.get(Category.TOP, [])
    bottoms = grouped.get(Category.BOTTOM, [])
    shoes = grouped.get(Category.SHOES, [])
    outerwear = grouped.get(Category.OUTERWEAR, [])
    outfits: List[OutfitCandidate] = []
    if not tops or not bottoms:
        return outfits

    limit = min(len(tops) * len(bottoms), limit)
    for top in tops:
        for bottom in bottoms:
            if len(outfits) >= limit:
                return outfits
            if not colors_compatible(top.color, bottom.color):
                logger.debug("Skipping %s + %s: colors clash", top.id, bottom.id)
                continue
            combo: List[Optional[WardrobeItem]] = [top, bottom]
            if shoes:
                combo.append(find_best_match(top, shoes, context))
            if _colder_than(context, SEPARATES_LAYER_BELOW_F) and outerwear:
                combo.append(find_best_match(top, outerwear, context))
            outfits.append(_unique_by_id(combo))
    return outfits


def _fallback_outfits(pool: Sequence[WardrobeItem], quota: int, rng: random.Random) -> List[OutfitCandidate]:
    """Walk a shuffled copy of ``pool`` taking 2-3 item chunks until the quota is met."""

    outfits: List[OutfitCandidate] = []
    shuffled = list(pool)
    rng.shuffle(shuffled)
    position = 0
    while len(outfits) < quota and position < len(shuffled):
        size = rng.choice(FALLBACK_SIZES)
        chunk = _unique_by_id(shuffled[position : position + size])
        position += size
        if len(chunk) >= 2:
            outfits.append(chunk)
    return outfits


def generate_outfit_combinations(
    items: Sequence[WardrobeItem],
    categorized: Mapping[Category, List[WardrobeItem]],
    context: RecommendationContext,
    max_combinations: int = DEFAULT_MAX_COMBINATIONS,
    rng: random.Random | None = None,
) -> GenerationResult:
    """Build up to ``max_combinations`` candidate outfits.

    Dress-based outfits come first, then top and bottom pairings, then random
    2-3 item groupings from ``items`` when the first two strategies fall
    short. Fallback groupings may repeat categories.
    """

    rng = rng or random.Random()
    candidates: List[OutfitCandidate] = []

    dress_outfits = _dress_outfits(categorized, context, max_combinations)
    candidates.extend(dress_outfits)

    separates = _separates_outfits(categorized, context, max_combinations - len(candidates))
    candidates.extend(separates)

    fallback: List[OutfitCandidate] = []
    if len(candidates) < max_combinations and len(items) >= 2:
        fallback = _fallback_outfits(items, max_combinations - len(candidates), rng)
        candidates.extend(fallback)

    diagnostics: Dict[str, object] = {
        "pool_size": len(items),
        "max_combinations": max_combinations,
        "dress_based": len(dress_outfits),
        "top_bottom": len(separates),
        "fallback": len(fallback),
        "total": len(candidates),
    }
    logger.info(
        "Generated %s candidates (dress=%s, separates=%s, fallback=%s)",
        len(candidates),
        len(dress_outfits),
        len(separates),
        len(fallback),
    )
    return GenerationResult(candidates=candidates, diagnostics=diagnostics)


__all__ = ["generate_outfit_combinations", "GenerationResult", "OutfitCandidate", "DEFAULT_MAX_COMBINATIONS"]
