"""Ordering and diversity-constrained selection of scored outfits."""

from __future__ import annotations

import logging
from typing import List, Sequence, Set

from models.recommendation import OutfitRecommendation

logger = logging.getLogger(__name__)

MAX_OVERLAP_FRACTION = 0.5


def rank_outfits(outfits: Sequence[OutfitRecommendation]) -> List[OutfitRecommendation]:
    """Sort by score, highest first; equal scores keep their input order."""

    return sorted(outfits, key=lambda outfit: -outfit.score)


def _overlap_fraction(outfit: OutfitRecommendation, used_ids: Set[str]) -> float:
    ids = outfit.item_ids
    if not ids:
        return 0.0
    return sum(1 for item_id in ids if item_id in used_ids) / len(ids)


def select_diverse(ranked: Sequence[OutfitRecommendation], count: int) -> List[OutfitRecommendation]:
    """Pick up to ``count`` outfits, preferring ones that reuse few items.

    The first pass accepts outfits whose items are less than half already
    used. If that leaves a shortfall, the remaining outfits are taken in rank
    order.
    """

    if count <= 0:
        return []

    selected: List[int] = []
    used_ids: Set[str] = set()
    for index, outfit in enumerate(ranked):
        if len(selected) >= count:
            break
        if _overlap_fraction(outfit, used_ids) < MAX_OVERLAP_FRACTION:
            selected.append(index)
            used_ids.update(outfit.item_ids)

    diverse_count = len(selected)
    if len(selected) < count:
        chosen = set(selected)
        for index in range(len(ranked)):
            if len(selected) >= count:
                break
            if index not in chosen:
                selected.append(index)
                chosen.add(index)

    logger.info(
        "Selected %s outfits (%s diverse) from %s ranked candidates", len(selected), diverse_count, len(ranked)
    )
    return [ranked[index] for index in selected[:count]]


__all__ = ["rank_outfits", "select_diverse", "MAX_OVERLAP_FRACTION"]
