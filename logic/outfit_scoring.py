"""Additive point scoring for candidate outfits."""

from __future__ import annotations

import random
from typing import List, Sequence

from logic.categorizer import categorize
from models.color_theory import analyze_color_harmony
from models.context import RecommendationContext
from models.recommendation import OutfitRecommendation
from models.taxonomy import Category
from models.wardrobe_item import WardrobeItem

HARMONY_WEIGHT = 30
OCCASION_POINTS = 20
WEATHER_POINTS = 20
UNWORN_ITEM_POINTS = 10
COMPLETENESS_POINTS = 20
COMPLETE_OUTFIT = frozenset({Category.TOP, Category.BOTTOM, Category.SHOES})


def _format_temperature(temperature: float) -> str:
    return f"{temperature:g}"


def score_outfit(
    items: Sequence[WardrobeItem],
    context: RecommendationContext,
    rng: random.Random | None = None,
) -> OutfitRecommendation:
    """Score a candidate and collect the notes explaining the score."""

    reasoning: List[str] = []
    harmony = analyze_color_harmony(items, rng)
    score = harmony.score * HARMONY_WEIGHT
    reasoning.append(harmony.description)

    if context.has_occasion:
        score += OCCASION_POINTS
        reasoning.append(f"Perfect for {context.occasion.strip()}")

    if context.weather is not None:
        score += WEATHER_POINTS
        reasoning.append(f"Suitable for {_format_temperature(context.weather.temperature)}°F weather")

    unworn = sum(1 for item in items if item.is_unworn)
    if unworn > 0:
        score += unworn * UNWORN_ITEM_POINTS
        reasoning.append(f"Includes {unworn} unworn item(s)")

    categories = {categorize(item) for item in items}
    if COMPLETE_OUTFIT.issubset(categories):
        score += COMPLETENESS_POINTS

    return OutfitRecommendation(items=list(items), score=score, color_harmony=harmony, reasoning=reasoning)


__all__ = ["score_outfit", "COMPLETE_OUTFIT"]
