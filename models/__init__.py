"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.context import RecommendationContext, UserPreferences, Weather, weather_from_summary
from models.recommendation import ColorHarmony, HarmonyType, OutfitRecommendation
from models.wardrobe_item import WardrobeItem, from_raw_metadata

__all__ = [
    "WardrobeItem",
    "from_raw_metadata",
    "RecommendationContext",
    "UserPreferences",
    "Weather",
    "weather_from_summary",
    "ColorHarmony",
    "HarmonyType",
    "OutfitRecommendation",
]
