"""Recommendation pipeline: filter, generate, score, rank and select outfits."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from logic.categorizer import categorize_wardrobe
from logic.combination_generator import generate_outfit_combinations
from logic.contextual_filtering import FilteringResult, filter_by_occasion, filter_by_weather
from logic.outfit_scoring import score_outfit
from logic.ranking import rank_outfits, select_diverse
from logic.validation import (
    RecommendationRequest,
    coerce_context,
    coerce_items,
    validation_failure,
)
from models.context import RecommendationContext
from models.recommendation import OutfitRecommendation
from models.wardrobe_item import WardrobeItem
from stylist_app.config import RecommenderConfig
from stylist_app.logging_config import get_logger, log_event, operation_context
from stylist_app.observability import instrument_operation

logger = get_logger(__name__)

CANDIDATES_PER_OUTFIT = 3


@dataclass(frozen=True)
class PipelineRun:
    """Ranked outfits of one request with the debug trail that produced them."""

    ranked: List[OutfitRecommendation]
    debug: Dict[str, object]


class OutfitRecommender:
    """Builds outfit recommendations from a wardrobe and a context.

    The recommender holds one random source used both for fallback sampling
    and for choosing harmony descriptions. Pass a seeded ``random.Random``
    for reproducible output.
    """

    def __init__(self, config: RecommenderConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or RecommenderConfig()
        self.rng = rng or self.config.build_rng()

    def recommend(
        self, items: Optional[Sequence[WardrobeItem]], context: RecommendationContext | None = None
    ) -> Optional[OutfitRecommendation]:
        """Return the best outfit, or None when nothing can be assembled."""

        context = context or RecommendationContext()
        with operation_context("recommender.recommend") as correlation_id:
            if not items:
                log_event(logger, logging.INFO, "recommendation_skipped", reason="empty_wardrobe")
                return None
            run = self._run_pipeline(list(items), context, self.config.max_combinations)
            best = run.ranked[0] if run.ranked else None
            log_event(
                logger,
                logging.INFO,
                "recommendation_completed",
                correlation_id=correlation_id,
                method="recommend",
                occasion=context.occasion,
                candidates=len(run.ranked),
                best_score=best.score if best else None,
            )
            return best

    def recommend_many(
        self,
        items: Optional[Sequence[WardrobeItem]],
        context: RecommendationContext | None = None,
        count: int | None = None,
    ) -> List[OutfitRecommendation]:
        """Return up to ``count`` diverse outfits, best first."""

        context = context or RecommendationContext()
        count = self.config.default_outfit_count if count is None else count
        with operation_context("recommender.recommend_many") as correlation_id:
            if not items or count <= 0:
                log_event(logger, logging.INFO, "recommendation_skipped", reason="empty_wardrobe_or_count")
                return []
            run = self._run_pipeline(list(items), context, count * CANDIDATES_PER_OUTFIT)
            selected = select_diverse(run.ranked, count)
            log_event(
                logger,
                logging.INFO,
                "recommendation_completed",
                correlation_id=correlation_id,
                method="recommend_many",
                occasion=context.occasion,
                candidates=len(run.ranked),
                outfit_count=len(selected),
            )
            return selected

    def explain(
        self, items: Sequence[WardrobeItem], context: RecommendationContext, count: int
    ) -> Dict[str, Any]:
        """Run the pipeline and return JSON-ready outfits with the debug trail."""

        if not items:
            return {"outfits": [], "debug_summary": {"reason": "empty_wardrobe"}}
        run = self._run_pipeline(list(items), context, count * CANDIDATES_PER_OUTFIT)
        selected = select_diverse(run.ranked, count)
        debug_summary = dict(run.debug)
        debug_summary["ranked_outfits"] = [
            {"score": outfit.score, "ids": outfit.item_ids, "harmony": outfit.color_harmony.type.value}
            for outfit in run.ranked
        ]
        return {"outfits": [outfit.to_dict() for outfit in selected], "debug_summary": debug_summary}

    def _apply_filters(self, items: List[WardrobeItem], context: RecommendationContext) -> Dict[str, object]:
        reasons: Dict[str, str] = {}
        debug_steps: List[Dict[str, object]] = []
        filtered = items

        steps = [
            ("weather", filter_by_weather, context.weather),
            ("occasion", filter_by_occasion, context.occasion),
        ]
        for name, func, step_input in steps:
            result: FilteringResult = func(filtered, step_input)  # type: ignore[arg-type]
            reasons.update(result.removed)
            debug_steps.append({"step": name, "debug": result.debug, "removed": result.removed})
            filtered = result.items

        return {"items": filtered, "steps": debug_steps, "reasons": reasons, "final_count": len(filtered)}

    def _run_pipeline(
        self, items: List[WardrobeItem], context: RecommendationContext, max_combinations: int
    ) -> PipelineRun:
        filter_results = self._apply_filters(items, context)
        filtered: List[WardrobeItem] = filter_results["items"]  # type: ignore[assignment]
        categorized = categorize_wardrobe(filtered)

        generation = generate_outfit_combinations(
            filtered, categorized, context, max_combinations=max_combinations, rng=self.rng
        )
        scored = [score_outfit(candidate, context, self.rng) for candidate in generation.candidates]
        ranked = rank_outfits(scored)

        debug = {
            "filters": {key: value for key, value in filter_results.items() if key != "items"},
            "categories": {category.value: len(group) for category, group in categorized.items()},
            "generation": generation.diagnostics,
        }
        return PipelineRun(ranked=ranked, debug=debug)


_default_recommender: OutfitRecommender | None = None


def _get_default_recommender() -> OutfitRecommender:
    global _default_recommender
    if _default_recommender is None:
        _default_recommender = OutfitRecommender(RecommenderConfig.from_env())
    return _default_recommender


def generate_smart_outfit(
    items: Optional[Sequence[WardrobeItem]],
    context: RecommendationContext | None = None,
    rng: random.Random | None = None,
) -> Optional[OutfitRecommendation]:
    """Return the single best outfit for ``context`` or None."""

    recommender = OutfitRecommender(rng=rng) if rng is not None else _get_default_recommender()
    return recommender.recommend(items, context)


def generate_multiple_outfits(
    items: Optional[Sequence[WardrobeItem]],
    context: RecommendationContext | None = None,
    count: int = 3,
    rng: random.Random | None = None,
) -> List[OutfitRecommendation]:
    """Return up to ``count`` diverse outfits for ``context``."""

    recommender = OutfitRecommender(rng=rng) if rng is not None else _get_default_recommender()
    return recommender.recommend_many(items, context, count)


@instrument_operation(
    "recommend_from_payload",
    input_model=RecommendationRequest,
    on_validation_error=lambda exc: validation_failure("Invalid recommendation request", exc),
)
def recommend_from_payload(
    items: List[Dict[str, Any]],
    context: Dict[str, Any],
    count: int = 3,
    recommender: OutfitRecommender | None = None,
) -> Dict[str, Any]:
    """Recommend outfits for a raw JSON-style payload.

    Returns ``status`` ``"ok"`` with outfits, ``"empty"`` when no outfit could
    be assembled, or ``"needs_review"`` when the envelope is invalid.
    """

    wardrobe = coerce_items(items)
    recommendation_context = coerce_context(context)
    engine = recommender or _get_default_recommender()
    result = engine.explain(wardrobe, recommendation_context, count)
    outfits = result["outfits"]

    if outfits:
        summary = f"Generated {len(outfits)} outfit(s) from {len(wardrobe)} wardrobe items."
    else:
        summary = "No outfits could be assembled. Add more wardrobe items or loosen the occasion and weather."
    debug_summary = result["debug_summary"]
    debug_summary["skipped_items"] = len(items) - len(wardrobe)
    return {
        "status": "ok" if outfits else "empty",
        "outfits": outfits,
        "summary": summary,
        "debug_summary": debug_summary,
    }


__all__ = [
    "OutfitRecommender",
    "PipelineRun",
    "generate_smart_outfit",
    "generate_multiple_outfits",
    "recommend_from_payload",
]
