"""Evaluation scenarios exercising occasions, temperatures and rain."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class EvaluationScenario:
    name: str
    description: str
    context: Dict[str, object]
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object]
    count: int = 3
    seed: int = 7
    tags: List[str] = field(default_factory=list)


def _wardrobe_fixtures() -> List[Dict[str, object]]:
    return [
        {"id": "top_blouse", "name": "Silk Blouse", "color": "White", "brand": "Everlane", "wear_count": 4},
        {"id": "top_tee", "name": "Graphic T-Shirt", "color": "Yellow", "tags": ["casual"], "wear_count": 9},
        {"id": "top_tank", "name": "Linen Tank Top", "color": "White", "wear_count": 2},
        {"id": "top_sports", "name": "Sports Bra Top", "color": "Pink", "tags": ["athletic"]},
        {"id": "bottom_jeans", "name": "Slim Jeans", "color": "Dark Blue", "tags": ["casual"], "wear_count": 12},
        {"id": "bottom_trousers", "name": "Tailored Trousers", "color": "Black", "brand": "Everlane", "wear_count": 3},
        {"id": "bottom_shorts", "name": "Denim Shorts", "color": "Light Blue", "wear_count": 1},
        {"id": "bottom_leggings", "name": "Running Leggings", "color": "Black", "tags": ["athletic"]},
        {
            "id": "dress_midi",
            "name": "Floral Midi Dress",
            "color": "Pink",
            "description": "Elegant wrap silhouette",
            "wear_count": 1,
        },
        {"id": "shoes_sneakers", "name": "White Sneakers", "color": "White", "tags": ["casual"], "wear_count": 20},
        {"id": "shoes_heels", "name": "Black Heels", "color": "Black", "wear_count": 5},
        {"id": "shoes_sandals", "name": "Leather Sandals", "color": "Brown", "wear_count": 6},
        {"id": "shoes_boots", "name": "Waterproof Ankle Boots", "color": "Black", "wear_count": 8},
        {"id": "shoes_running", "name": "Running Shoes", "color": "White", "tags": ["athletic"]},
        {"id": "outer_coat", "name": "Wool Coat", "color": "Beige", "wear_count": 7},
        {"id": "outer_rain", "name": "Rain Jacket", "color": "Yellow", "wear_count": 2},
        {"id": "outer_sweater", "name": "Chunky Sweater", "color": "Grey", "wear_count": 3},
        {"id": "acc_tote", "name": "Canvas Tote Bag", "color": "Cream", "wear_count": 15},
    ]


SCENARIOS = [
    EvaluationScenario(
        name="summer_weekend",
        description="Relaxed weekend on a hot, clear day.",
        context={"occasion": "weekend", "weather": {"temperature": 85, "condition": "Clear"}},
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 1, "excluded_keywords": ["sweater", "wool"]},
    ),
    EvaluationScenario(
        name="rainy_office",
        description="Office day with light rain that calls for a layer.",
        context={"occasion": "work", "weather": {"temperature": 55, "condition": "Light rain"}},
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 1, "requires_outerwear": True, "excluded_keywords": ["canvas"]},
    ),
    EvaluationScenario(
        name="winter_dinner",
        description="Dinner out on a snowy night.",
        context={"occasion": "dinner", "weather": {"temperature": 30, "condition": "Snow"}, "timeOfDay": "evening"},
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 1, "requires_outerwear": True, "excluded_keywords": ["sandal", "tank"]},
    ),
    EvaluationScenario(
        name="gym_session",
        description="Workout with only athletic pieces allowed.",
        context={"occasion": "gym"},
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 1, "requires_complete": True, "top_harmony": "balanced"},
        count=1,
    ),
]
