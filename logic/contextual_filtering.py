"""Deterministic filtering functions for weather and occasion."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from logic.categorizer import categorize
from models.context import Weather, normalize_occasion
from models.taxonomy import Category
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

COLD_THRESHOLD_F = 50
HOT_THRESHOLD_F = 75

COLD_KEEP_KEYWORDS = ("sweater", "long sleeve", "boot", "closed")
COLD_EXCLUDE_KEYWORDS = ("tank", "shorts", "sandal")
HOT_KEEP_KEYWORDS = ("tank", "short", "sandal", "light", "breathable")
HOT_EXCLUDE_KEYWORDS = ("heavy", "wool", "sweater", "winter")
RAIN_KEEP_KEYWORDS = ("rain", "waterproof")
RAIN_EXCLUDE_KEYWORDS = ("suede", "canvas")


@dataclass(frozen=True)
class OccasionRule:
    """Keep items mentioning ``keep``; otherwise keep items free of ``block``.

    A rule without ``block`` keeps only items mentioning ``keep``.
    """

    name: str
    keep: Tuple[str, ...]
    block: Optional[Tuple[str, ...]] = None

    def allows(self, text: str) -> bool:
        if any(keyword in text for keyword in self.keep):
            return True
        if self.block is None:
            return False
        return not any(keyword in text for keyword in self.block)


_WORK_RULE = OccasionRule(
    name="work",
    keep=("work", "professional", "business", "formal", "blazer", "dress pants", "dress shirt", "trousers"),
    block=("casual", "athletic"),
)
_CASUAL_RULE = OccasionRule(name="casual", keep=("casual", "jeans", "t-shirt", "sneaker"), block=("formal",))
_EVENING_RULE = OccasionRule(name="evening", keep=("elegant", "dress", "nice"), block=("casual", "athletic"))
_WORKOUT_RULE = OccasionRule(name="workout", keep=("athletic", "sport", "workout", "gym", "running"))

OCCASION_RULES: Dict[str, OccasionRule] = {
    "work": _WORK_RULE,
    "professional": _WORK_RULE,
    "business": _WORK_RULE,
    "formal": _WORK_RULE,
    "casual": _CASUAL_RULE,
    "weekend": _CASUAL_RULE,
    "relaxed": _CASUAL_RULE,
    "date": _EVENING_RULE,
    "dinner": _EVENING_RULE,
    "evening": _EVENING_RULE,
    "workout": _WORKOUT_RULE,
    "gym": _WORKOUT_RULE,
    "athletic": _WORKOUT_RULE,
}


@dataclass(frozen=True)
class FilteringResult:
    """Captures the outcome of a single filtering step."""

    items: List[WardrobeItem]
    removed: Dict[str, str]
    debug: Dict[str, object]


def _mentions(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def _weather_exclusion(item: WardrobeItem, weather: Weather) -> Optional[str]:
    """Return why ``item`` is unsuitable for ``weather``, or None to keep it."""

    name = item.name.lower()
    is_outerwear = categorize(item) is Category.OUTERWEAR
    if weather.temperature < COLD_THRESHOLD_F:
        if is_outerwear or _mentions(name, COLD_KEEP_KEYWORDS):
            return None
        if _mentions(name, COLD_EXCLUDE_KEYWORDS):
            return "too light for cold weather"
    elif weather.temperature > HOT_THRESHOLD_F:
        if _mentions(name, HOT_EXCLUDE_KEYWORDS) or (is_outerwear and "coat" in name):
            return "too warm for hot weather"
        if _mentions(name, HOT_KEEP_KEYWORDS):
            return None

    if weather.is_rainy:
        if is_outerwear or _mentions(name, RAIN_KEEP_KEYWORDS):
            return None
        if _mentions(name, RAIN_EXCLUDE_KEYWORDS):
            return "not suitable for rain"
    return None


def filter_by_weather(items: List[WardrobeItem], weather: Optional[Weather]) -> FilteringResult:
    """Filter wardrobe items using temperature and precipitation rules."""

    if weather is None:
        return FilteringResult(items=list(items), removed={}, debug={"input_count": len(items), "skipped": True})

    removed: Dict[str, str] = {}
    kept: List[WardrobeItem] = []
    for item in items:
        reason = _weather_exclusion(item, weather)
        if reason:
            removed[item.id] = reason
        else:
            kept.append(item)

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "temperature": weather.temperature,
        "rain": weather.is_rainy,
    }
    logger.info("Weather filter kept %s of %s items", len(kept), len(items))
    return FilteringResult(items=kept, removed=removed, debug=debug)


def filter_by_occasion(items: List[WardrobeItem], occasion: Optional[str]) -> FilteringResult:
    """Filter items whose text does not suit the requested occasion.

    Unknown occasions pass every item through.
    """

    rule = OCCASION_RULES.get(normalize_occasion(occasion))
    if rule is None:
        return FilteringResult(
            items=list(items),
            removed={},
            debug={"input_count": len(items), "occasion": occasion, "skipped": True},
        )

    removed: Dict[str, str] = {}
    kept: List[WardrobeItem] = []
    for item in items:
        if rule.allows(item.search_text):
            kept.append(item)
        else:
            removed[item.id] = f"not suited to {rule.name} occasions"

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "occasion": occasion,
        "rule": rule.name,
    }
    logger.info("Occasion filter '%s' kept %s of %s items", rule.name, len(kept), len(items))
    return FilteringResult(items=kept, removed=removed, debug=debug)


__all__ = [
    "filter_by_weather",
    "filter_by_occasion",
    "FilteringResult",
    "OccasionRule",
    "OCCASION_RULES",
]
