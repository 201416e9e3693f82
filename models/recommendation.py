"""Result schemas returned to the consumer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from models.wardrobe_item import WardrobeItem


class HarmonyType(str, Enum):
    MONOCHROMATIC = "monochromatic"
    NEUTRAL = "neutral"
    BALANCED = "balanced"
    COMPLEMENTARY = "complementary"
    MIXED = "mixed"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ColorHarmony:
    score: float
    type: HarmonyType
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "type": self.type.value, "description": self.description}


@dataclass
class OutfitRecommendation:
    """A scored outfit with the notes explaining its score."""

    items: List[WardrobeItem]
    score: float
    color_harmony: ColorHarmony
    reasoning: List[str] = field(default_factory=list)

    @property
    def item_ids(self) -> List[str]:
        return [item.id for item in self.items]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "score": self.score,
            "reasoning": list(self.reasoning),
            "color_harmony": self.color_harmony.to_dict(),
        }


__all__ = ["HarmonyType", "ColorHarmony", "OutfitRecommendation"]
