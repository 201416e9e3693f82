"""Simple entrypoint to run the outfit recommender locally."""

import json

from evaluation.scenarios import SCENARIOS
from logic.recommender import OutfitRecommender, recommend_from_payload
from stylist_app.config import RecommenderConfig
from stylist_app.logging_config import configure_logging


def main() -> None:
    config = RecommenderConfig.from_env()
    configure_logging(config.log_level)
    scenario = SCENARIOS[0]
    response = recommend_from_payload(
        items=scenario.wardrobe_items,
        context=scenario.context,
        count=config.default_outfit_count,
        recommender=OutfitRecommender(config),
    )
    print(json.dumps({"status": response["status"], "outfits": response["outfits"]}, indent=2))


if __name__ == "__main__":
    main()
