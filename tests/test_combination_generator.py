"""Tests for candidate outfit generation strategies."""
from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import List

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.categorizer import categorize, categorize_wardrobe
from logic.combination_generator import generate_outfit_combinations
from models.context import RecommendationContext, Weather
from models.taxonomy import Category
from models.wardrobe_item import WardrobeItem


def _generate(items: List[WardrobeItem], context: RecommendationContext | None = None, **kwargs):
    return generate_outfit_combinations(
        items,
        categorize_wardrobe(items),
        context or RecommendationContext(),
        rng=kwargs.pop("rng", random.Random(3)),
        **kwargs,
    )


def _ids(outfit: List[WardrobeItem]) -> List[str]:
    return [item.id for item in outfit]


def _large_wardrobe() -> List[WardrobeItem]:
    items = [WardrobeItem(id=f"dress{i}", name=f"Dress {i}", color="black") for i in range(4)]
    items += [WardrobeItem(id=f"top{i}", name=f"Shirt {i}", color=color) for i, color in enumerate(["red", "blue", "white"])]
    items += [WardrobeItem(id=f"bottom{i}", name=f"Skirt {i}", color=color) for i, color in enumerate(["pink", "black", "beige"])]
    items += [WardrobeItem(id=f"shoe{i}", name=f"Loafer {i}", color="brown") for i in range(2)]
    items += [WardrobeItem(id=f"outer{i}", name=f"Parka {i}", color="navy") for i in range(2)]
    items += [WardrobeItem(id="hat", name="Bucket Hat", color="green")]
    return items


def test_dress_outfit_adds_layer_when_cold():
    dress = WardrobeItem(id="d", name="Floral Dress", color="pink")
    heels = WardrobeItem(id="s", name="Black Heels", color="black")
    coat = WardrobeItem(id="c", name="Trench Coat", color="beige")
    cold = _generate([dress, heels, coat], RecommendationContext(weather=Weather(temperature=50)))
    assert _ids(cold.candidates[0]) == ["d", "s", "c"]
    assert cold.diagnostics["dress_based"] == 1

    mild = _generate([dress, heels, coat], RecommendationContext(weather=Weather(temperature=70)))
    assert _ids(mild.candidates[0]) == ["d", "s"]


def test_dress_needs_shoes():
    dress = WardrobeItem(id="d", name="Floral Dress")
    coat = WardrobeItem(id="c", name="Trench Coat")
    result = _generate([dress, coat])
    assert result.diagnostics["dress_based"] == 0


def test_dress_strategy_is_bounded_by_half_the_quota():
    dresses = [WardrobeItem(id=f"d{i}", name=f"Gown {i}") for i in range(6)]
    shoes = [WardrobeItem(id="s", name="Sandals")]
    result = _generate(dresses + shoes, max_combinations=4)
    assert result.diagnostics["dress_based"] == 2
    assert len(result.candidates) <= 4


def test_separates_skip_clashing_colors():
    tee = WardrobeItem(id="t", name="Red Tee", color="red")
    skirt = WardrobeItem(id="b1", name="Pink Skirt", color="pink")
    jeans = WardrobeItem(id="b2", name="Black Jeans", color="black")
    result = _generate([tee, skirt, jeans], max_combinations=1)
    assert result.diagnostics["top_bottom"] == 1
    assert _ids(result.candidates[0]) == ["t", "b2"]


def test_separates_attach_shoes_and_layer_below_sixty_five():
    tee = WardrobeItem(id="t", name="White Tee", color="white")
    jeans = WardrobeItem(id="b", name="Blue Jeans", color="blue")
    boots = WardrobeItem(id="s", name="Chelsea Boots", color="brown")
    jacket = WardrobeItem(id="o", name="Denim Jacket", color="blue")
    items = [tee, jeans, boots, jacket]

    cool = _generate(items, RecommendationContext(weather=Weather(temperature=60)), max_combinations=1)
    assert _ids(cool.candidates[0]) == ["t", "b", "s", "o"]

    warm = _generate(items, RecommendationContext(weather=Weather(temperature=65)), max_combinations=1)
    assert _ids(warm.candidates[0]) == ["t", "b", "s"]


def test_separates_respect_quota():
    tops = [WardrobeItem(id=f"t{i}", name=f"Polo {i}", color="white") for i in range(3)]
    bottoms = [WardrobeItem(id=f"b{i}", name=f"Chino {i}", color="beige") for i in range(4)]
    result = _generate(tops + bottoms, max_combinations=5)
    assert result.diagnostics["top_bottom"] == 5
    assert result.diagnostics["fallback"] == 0
    assert len(result.candidates) == 5


def test_fallback_samples_from_pool():
    pool = [WardrobeItem(id=f"x{i}", name=f"Thing {i}") for i in range(7)]
    assert all(categorize(item) is Category.OTHER for item in pool)
    result = _generate(pool, max_combinations=10)
    assert result.diagnostics["fallback"] == len(result.candidates) >= 2
    pool_ids = {item.id for item in pool}
    for outfit in result.candidates:
        assert 2 <= len(outfit) <= 3
        assert set(_ids(outfit)) <= pool_ids


def test_fallback_needs_two_items():
    result = _generate([WardrobeItem(id="solo", name="Thing")])
    assert result.candidates == []


def test_fallback_skips_repeated_ids():
    twins = [WardrobeItem(id="same", name="Thing A"), WardrobeItem(id="same", name="Thing B")]
    assert _generate(twins).candidates == []


def test_candidates_never_exceed_quota_or_repeat_ids():
    items = _large_wardrobe()
    items.append(WardrobeItem(id="top0", name="Shirt duplicate", color="white"))
    for seed in range(15):
        for quota in (1, 3, 9, 10):
            result = _generate(
                items,
                RecommendationContext(weather=Weather(temperature=40)),
                max_combinations=quota,
                rng=random.Random(seed),
            )
            assert len(result.candidates) <= quota
            for outfit in result.candidates:
                ids = _ids(outfit)
                assert len(ids) == len(set(ids))


def test_strategies_run_in_order():
    result = _generate(_large_wardrobe(), max_combinations=10)
    first = result.candidates[0]
    assert categorize(first[0]) is Category.DRESS
    assert result.diagnostics["dress_based"] == 4
    assert result.diagnostics["top_bottom"] == 6
    assert result.diagnostics["fallback"] == 0
