"""Recommendation context supplied by the caller (occasion, weather, time)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

logger = logging.getLogger(__name__)

TimeOfDay = Literal["morning", "afternoon", "evening", "night"]
StylePreference = Literal["casual", "formal", "trendy", "classic"]

DEFAULT_SUMMARY_TEMPERATURE = 70.0
_TEMPERATURE_PATTERN = re.compile(r"(-?\d+)")


def normalize_occasion(occasion: str | None) -> str:
    """Lower-case ``occasion`` and collapse its whitespace; empty for None."""

    return " ".join((occasion or "").lower().split())


@dataclass(frozen=True)
class Weather:
    """Current conditions; ``temperature`` is in degrees Fahrenheit."""

    temperature: float
    condition: str = ""
    humidity: Optional[float] = None

    @property
    def is_rainy(self) -> bool:
        return "rain" in self.condition.lower()


@dataclass(frozen=True)
class UserPreferences:
    favorite_colors: Tuple[str, ...] = field(default_factory=tuple)
    avoid_colors: Tuple[str, ...] = field(default_factory=tuple)
    style_preference: Optional[StylePreference] = None


@dataclass(frozen=True)
class RecommendationContext:
    """Everything the engine knows about the request besides the wardrobe."""

    occasion: Optional[str] = None
    weather: Optional[Weather] = None
    time_of_day: Optional[TimeOfDay] = None
    user_preferences: Optional[UserPreferences] = None

    @property
    def occasion_key(self) -> str:
        return normalize_occasion(self.occasion)

    @property
    def has_occasion(self) -> bool:
        return bool(self.occasion_key)


def weather_from_summary(summary: str | None) -> Optional[Weather]:
    """Build :class:`Weather` from a short text such as ``"72°F, sunny"``.

    The first integer is read as the temperature; summaries without one fall
    back to a mild 70°F. Returns ``None`` for empty input.
    """

    if not summary or not summary.strip():
        return None
    match = _TEMPERATURE_PATTERN.search(summary)
    temperature = float(match.group(1)) if match else DEFAULT_SUMMARY_TEMPERATURE
    logger.debug("Parsed weather summary %r -> %s°F", summary, temperature)
    return Weather(temperature=temperature, condition=summary.strip())


__all__ = [
    "TimeOfDay",
    "StylePreference",
    "Weather",
    "UserPreferences",
    "RecommendationContext",
    "weather_from_summary",
    "normalize_occasion",
]
