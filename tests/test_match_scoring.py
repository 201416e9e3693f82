"""Tests for pairwise match scoring."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.match_scoring import find_best_match, match_score
from models.context import RecommendationContext
from models.wardrobe_item import WardrobeItem

EMPTY = RecommendationContext()


def test_compatible_unworn_candidate():
    blazer = WardrobeItem(id="1", name="Navy Blazer", color="navy")
    pumps = WardrobeItem(id="2", name="Red Pumps", color="red")
    assert match_score(blazer, pumps, EMPTY) == 70


def test_occasion_in_either_name_adds_points():
    blazer = WardrobeItem(id="1", name="Work Blazer", color="black", wear_count=2)
    loafers = WardrobeItem(id="2", name="Loafers", color="black", wear_count=2)
    assert match_score(blazer, loafers, RecommendationContext(occasion="WORK")) == 80
    assert match_score(loafers, blazer, RecommendationContext(occasion="work")) == 80
    assert match_score(blazer, loafers, EMPTY) == 50


def test_unworn_bonus_reads_only_the_candidate():
    worn = WardrobeItem(id="1", name="Tee", color="white", wear_count=4)
    fresh = WardrobeItem(id="2", name="Jeans", color="blue", wear_count=0)
    assert match_score(worn, fresh, EMPTY) == 70
    assert match_score(fresh, worn, EMPTY) == 50


def test_brand_bonus_requires_both_brands():
    a = WardrobeItem(id="1", name="Tee", brand="Uniqlo", wear_count=1)
    b = WardrobeItem(id="2", name="Shorts", brand="Uniqlo", wear_count=1)
    c = WardrobeItem(id="3", name="Shorts", wear_count=1)
    assert match_score(a, b, EMPTY) == 60
    assert match_score(a, c, EMPTY) == 50
    assert match_score(c, WardrobeItem(id="4", name="Cap", wear_count=1), EMPTY) == 50


def test_clashing_worn_pair_scores_zero():
    a = WardrobeItem(id="1", name="Red Top", color="red", wear_count=1)
    b = WardrobeItem(id="2", name="Pink Skirt", color="pink", wear_count=1)
    assert match_score(a, b, EMPTY) == 0


def test_find_best_match_prefers_highest_score():
    top = WardrobeItem(id="t", name="Red Top", color="red")
    pink = WardrobeItem(id="s1", name="Pink Flats", color="pink")
    worn_green = WardrobeItem(id="s2", name="Green Sneakers", color="green", wear_count=3)
    fresh_black = WardrobeItem(id="s3", name="Black Boots", color="black")
    assert find_best_match(top, [pink, worn_green, fresh_black], EMPTY) is fresh_black


def test_find_best_match_first_wins_ties():
    top = WardrobeItem(id="t", name="White Top", color="white")
    first = WardrobeItem(id="a", name="Black Heels", color="black")
    second = WardrobeItem(id="b", name="Brown Boots", color="brown")
    assert find_best_match(top, [first, second], EMPTY) is first


def test_find_best_match_empty_pool():
    assert find_best_match(WardrobeItem(id="t", name="Top"), [], EMPTY) is None


def test_padded_occasion_still_matches_names():
    blazer = WardrobeItem(id="1", name="Work Blazer", color="black", wear_count=2)
    loafers = WardrobeItem(id="2", name="Loafers", color="black", wear_count=2)
    assert match_score(blazer, loafers, RecommendationContext(occasion="  Work ")) == 80
    assert match_score(blazer, loafers, RecommendationContext(occasion="   ")) == 50
