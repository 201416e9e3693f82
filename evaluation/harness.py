"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

import random
from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.categorizer import categorize
from logic.outfit_scoring import COMPLETE_OUTFIT
from logic.recommender import OutfitRecommender, recommend_from_payload
from models.taxonomy import Category
from models.wardrobe_item import from_raw_metadata
from stylist_app.config import RecommenderConfig


def _categories(outfit: Dict[str, object]) -> set:
    return {categorize(from_raw_metadata(item)) for item in outfit.get("items", [])}


def _evaluate_expectations(expectations: Dict[str, object], outfits: List[Dict[str, object]]) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    checks["min_outfits"] = len(outfits) >= int(expectations.get("min_outfits", 1))
    if expectations.get("requires_outerwear"):
        checks["requires_outerwear"] = any(Category.OUTERWEAR in _categories(outfit) for outfit in outfits)
    if expectations.get("excluded_keywords"):
        keywords = [str(keyword).lower() for keyword in expectations["excluded_keywords"]]
        checks["excluded_keywords"] = not any(
            keyword in str(item.get("name", "")).lower()
            for outfit in outfits
            for item in outfit.get("items", [])
            for keyword in keywords
        )
    if expectations.get("requires_complete"):
        checks["requires_complete"] = bool(outfits) and COMPLETE_OUTFIT.issubset(_categories(outfits[0]))
    if expectations.get("top_harmony"):
        checks["top_harmony"] = bool(outfits) and outfits[0]["color_harmony"]["type"] == expectations["top_harmony"]
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario) -> Dict[str, object]:
    config = RecommenderConfig.from_env()
    recommender = OutfitRecommender(config=config, rng=random.Random(scenario.seed))
    response = recommend_from_payload(
        items=scenario.wardrobe_items,
        context=scenario.context,
        count=scenario.count,
        recommender=recommender,
    )
    outfits = response.get("outfits", [])
    evaluation = _evaluate_expectations(scenario.expectations, outfits)
    return {
        "scenario": scenario.name,
        "passed": evaluation["passed"],
        "checks": evaluation["checks"],
        "outfit_count": len(outfits),
        "response": response,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
