"""Color compatibility and harmony rules for outfit scoring."""
from __future__ import annotations

import logging
import random
from itertools import combinations
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from models.recommendation import ColorHarmony, HarmonyType
from models.taxonomy import COMPLEMENTARY_COLORS, is_neutral, normalize_color_name
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

HARMONY_SCORES: Dict[HarmonyType, float] = {
    HarmonyType.UNKNOWN: 0.5,
    HarmonyType.MONOCHROMATIC: 0.9,
    HarmonyType.NEUTRAL: 1.0,
    HarmonyType.BALANCED: 0.95,
    HarmonyType.COMPLEMENTARY: 0.85,
    HarmonyType.MIXED: 0.7,
}

HARMONY_DESCRIPTIONS: Dict[HarmonyType, Tuple[str, ...]] = {
    HarmonyType.UNKNOWN: (
        "Color information not available",
        "Add colors to these pieces for a sharper color read",
        "No color details to judge this palette",
        "Colors unknown, so the pairing is judged on fit alone",
        "Palette can't be assessed without item colors",
    ),
    HarmonyType.MONOCHROMATIC: (
        "Monochromatic color scheme creates a cohesive look",
        "One color head to toe keeps the look streamlined",
        "Tonal dressing gives a polished, unified feel",
        "A single shade throughout reads clean and intentional",
        "Matching tones make the outfit feel put together",
    ),
    HarmonyType.NEUTRAL: (
        "Classic neutral palette - always elegant",
        "Neutral tones keep the look timeless",
        "An all-neutral palette that pairs with anything",
        "Understated neutrals for an effortless finish",
        "Clean neutral colors make this easy to wear",
    ),
    HarmonyType.BALANCED: (
        "Well-balanced colors with neutral accents",
        "A single accent color anchored by neutrals",
        "Neutrals let the accent piece stand out",
        "One pop of color balanced by calm basics",
        "Grounded neutrals with a touch of color",
    ),
    HarmonyType.COMPLEMENTARY: (
        "Complementary colors create visual interest",
        "These colors play off each other nicely",
        "Contrasting shades that work well together",
        "A confident pairing of complementary tones",
        "Colors that balance and energize each other",
    ),
    HarmonyType.MIXED: (
        "Colorful combination",
        "A bold mix of colors",
        "An eclectic palette with plenty of personality",
        "Playful colors for a statement look",
        "A lively blend of different shades",
    ),
}


def normalize_color(color: Optional[str]) -> str:
    """Return the canonical color name, or an empty string when missing."""

    if not color:
        return ""
    return normalize_color_name(color)


def _complementary(c1: str, c2: str) -> bool:
    return c2 in COMPLEMENTARY_COLORS.get(c1, ()) or c1 in COMPLEMENTARY_COLORS.get(c2, ())


def colors_compatible(color1: Optional[str], color2: Optional[str]) -> bool:
    """Return True when two item colors can be worn together.

    A missing color on either side is treated as compatible.
    """

    c1, c2 = normalize_color(color1), normalize_color(color2)
    if not c1 or not c2:
        return True
    if c1 == c2:
        return True
    if is_neutral(c1) or is_neutral(c2):
        return True
    result = _complementary(c1, c2)
    logger.debug("complementary check (%s, %s) -> %s", c1, c2, result)
    return result


def monochrome(colors: Iterable[str]) -> bool:
    """Return True when all provided colors collapse to a single tone."""

    return len(set(colors)) == 1


def _classify(colors: Sequence[str]) -> HarmonyType:
    if not colors:
        return HarmonyType.UNKNOWN
    if monochrome(colors):
        return HarmonyType.MONOCHROMATIC
    unique: List[str] = list(dict.fromkeys(colors))
    accents = [color for color in unique if not is_neutral(color)]
    if not accents:
        return HarmonyType.NEUTRAL
    if len(accents) == 1 and len(accents) < len(unique):
        return HarmonyType.BALANCED
    if any(colors_compatible(c1, c2) for c1, c2 in combinations(unique, 2)):
        return HarmonyType.COMPLEMENTARY
    return HarmonyType.MIXED


def analyze_color_harmony(items: Sequence[WardrobeItem], rng: random.Random | None = None) -> ColorHarmony:
    """Classify the palette of an outfit.

    ``score`` and ``type`` depend only on the colors present; ``rng`` only
    picks which phrasing of the description is returned.
    """

    colors = [normalize_color(item.color) for item in items]
    colors = [color for color in colors if color]
    harmony_type = _classify(colors)
    phrasings = HARMONY_DESCRIPTIONS[harmony_type]
    description = phrasings[(rng or random).randrange(len(phrasings))]
    logger.debug("harmony for %s -> %s", colors, harmony_type.value)
    return ColorHarmony(score=HARMONY_SCORES[harmony_type], type=harmony_type, description=description)


__all__ = [
    "HARMONY_SCORES",
    "HARMONY_DESCRIPTIONS",
    "normalize_color",
    "colors_compatible",
    "monochrome",
    "analyze_color_harmony",
]
