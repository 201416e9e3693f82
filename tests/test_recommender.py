"""End-to-end tests for the recommendation pipeline and payload boundary."""
from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Dict, List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.categorizer import categorize
from logic.recommender import (
    OutfitRecommender,
    generate_multiple_outfits,
    generate_smart_outfit,
    recommend_from_payload,
)
from models.context import RecommendationContext, Weather
from models.recommendation import HarmonyType
from models.taxonomy import Category
from models.wardrobe_item import WardrobeItem
from stylist_app.config import RecommenderConfig


def _work_wardrobe() -> List[WardrobeItem]:
    return [
        WardrobeItem(id="1", name="Black Blazer", color="Black"),
        WardrobeItem(id="2", name="White Blouse", color="White"),
        WardrobeItem(id="3", name="Black Trousers", color="Black"),
        WardrobeItem(id="4", name="Black Heels", color="Black"),
    ]


def _mixed_wardrobe() -> List[WardrobeItem]:
    return [
        WardrobeItem(id="t1", name="Striped Shirt", color="white", wear_count=3),
        WardrobeItem(id="t2", name="Cotton Tee", color="red"),
        WardrobeItem(id="t3", name="Chunky Sweater", color="gray"),
        WardrobeItem(id="b1", name="Blue Jeans", color="blue", wear_count=10),
        WardrobeItem(id="b2", name="Linen Shorts", color="beige"),
        WardrobeItem(id="d1", name="Sun Dress", color="yellow"),
        WardrobeItem(id="s1", name="Leather Sandals", color="brown"),
        WardrobeItem(id="s2", name="White Sneakers", color="white", wear_count=1),
        WardrobeItem(id="o1", name="Wool Coat", color="navy"),
        WardrobeItem(id="a1", name="Straw Hat", color="beige"),
    ]


def _payload_items() -> List[Dict[str, object]]:
    return [item.to_dict() for item in _work_wardrobe()]


def test_work_example_end_to_end():
    items = _work_wardrobe()
    assert [categorize(item) for item in items] == [
        Category.OUTERWEAR,
        Category.TOP,
        Category.BOTTOM,
        Category.SHOES,
    ]
    outfit = generate_smart_outfit(items, RecommendationContext(occasion="work"), rng=random.Random(1))
    assert outfit is not None
    assert {"2", "3", "4"} <= set(outfit.item_ids)
    assert outfit.color_harmony.type is HarmonyType.NEUTRAL
    assert outfit.color_harmony.score == 1.0
    assert "Perfect for work" in outfit.reasoning


@pytest.mark.parametrize("items", [[], None])
def test_empty_wardrobe(items):
    context = RecommendationContext(occasion="work")
    assert generate_smart_outfit(items, context, rng=random.Random(0)) is None
    assert generate_multiple_outfits(items, context, rng=random.Random(0)) == []


def test_no_candidates_yields_none():
    lone = [WardrobeItem(id="x", name="Mystery Item")]
    assert generate_smart_outfit(lone, RecommendationContext(), rng=random.Random(0)) is None
    office = _work_wardrobe()
    assert generate_smart_outfit(office, RecommendationContext(occasion="gym"), rng=random.Random(0)) is None


def test_hot_weather_never_recommends_sweaters_or_coats():
    context = RecommendationContext(occasion="casual", weather=Weather(temperature=85, condition="Clear"))
    for seed in range(10):
        outfits = generate_multiple_outfits(_mixed_wardrobe(), context, count=3, rng=random.Random(seed))
        assert outfits
        names = [item.name.lower() for outfit in outfits for item in outfit.items]
        assert not any("sweater" in name or "wool" in name for name in names)


def test_multiple_outfits_are_bounded_and_duplicate_free():
    context = RecommendationContext(weather=Weather(temperature=55, condition="Cloudy"))
    for count in (1, 2, 3, 5):
        outfits = generate_multiple_outfits(_mixed_wardrobe(), context, count=count, rng=random.Random(count))
        assert 1 <= len(outfits) <= count
        assert outfits[0].score == max(outfit.score for outfit in outfits)
        for outfit in outfits:
            assert len(outfit.item_ids) == len(set(outfit.item_ids))


def test_seeded_recommenders_are_reproducible():
    config = RecommenderConfig(random_seed=11)
    context = RecommendationContext(occasion="weekend")
    first = OutfitRecommender(config).recommend_many(_mixed_wardrobe(), context, 3)
    second = OutfitRecommender(config).recommend_many(_mixed_wardrobe(), context, 3)
    assert [o.to_dict() for o in first] == [o.to_dict() for o in second]


def test_recommend_many_uses_configured_count():
    recommender = OutfitRecommender(RecommenderConfig(default_outfit_count=2), rng=random.Random(4))
    assert len(recommender.recommend_many(_mixed_wardrobe())) <= 2


def test_payload_success():
    response = recommend_from_payload(
        items=_payload_items(),
        context={"occasion": "work", "weather": {"temperature": 68, "condition": "Clear"}, "timeOfDay": "Morning"},
        count=2,
        recommender=OutfitRecommender(rng=random.Random(2)),
    )
    assert response["status"] == "ok"
    assert 1 <= len(response["outfits"]) <= 2
    best = response["outfits"][0]
    assert best["color_harmony"]["type"] == "neutral"
    assert "Suitable for 68°F weather" in best["reasoning"]
    assert response["debug_summary"]["generation"]["max_combinations"] == 6
    assert response["debug_summary"]["skipped_items"] == 0


def test_payload_skips_invalid_items():
    items = _payload_items() + [{"name": "No id"}, {"id": "5", "name": "Loafers", "wear_count": -2}]
    response = recommend_from_payload(
        items=items, context={}, count=1, recommender=OutfitRecommender(rng=random.Random(2))
    )
    assert response["status"] == "ok"
    assert response["debug_summary"]["skipped_items"] == 2


def test_payload_empty_wardrobe():
    response = recommend_from_payload(items=[], context={"occasion": "date"}, count=3)
    assert response["status"] == "empty"
    assert response["outfits"] == []


def test_payload_invalid_envelope_needs_review():
    response = recommend_from_payload(items=_payload_items(), context={"weather": {"condition": "rain"}}, count=0)
    assert response["status"] == "needs_review"
    locations = [tuple(detail["loc"]) for detail in response["details"]]
    assert ("count",) in locations
    assert ("context", "weather", "temperature") in locations


def test_payload_accepts_positional_arguments():
    response = recommend_from_payload(
        _payload_items(), {"occasion": "work"}, 1, OutfitRecommender(rng=random.Random(3))
    )
    assert response["status"] == "ok"
    assert len(response["outfits"]) == 1
    assert response["debug_summary"]["generation"]["max_combinations"] == 3


def test_positional_envelope_is_still_validated():
    response = recommend_from_payload(_payload_items(), {"occasion": "work"}, 0)
    assert response["status"] == "needs_review"
    assert [tuple(detail["loc"]) for detail in response["details"]] == [("count",)]
