"""Pydantic schemas converting loose request payloads into engine types."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.context import RecommendationContext, UserPreferences, Weather
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)


class WardrobeItemInput(BaseModel):
    """Input contract for one catalog record."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: Optional[str] = None
    color: Optional[str] = None
    brand: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    wear_count: Optional[int] = Field(default=None, ge=0)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _listify_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    def to_domain(self) -> WardrobeItem:
        return WardrobeItem(
            id=self.id,
            name=self.name,
            category=self.category,
            color=self.color,
            brand=self.brand,
            description=self.description,
            image=self.image,
            tags=tuple(self.tags),
            wear_count=self.wear_count,
        )


class WeatherInput(BaseModel):
    temperature: float
    condition: str = ""
    humidity: Optional[float] = None

    def to_domain(self) -> Weather:
        return Weather(temperature=self.temperature, condition=self.condition, humidity=self.humidity)


class PreferencesInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    favorite_colors: List[str] = Field(default_factory=list, alias="favoriteColors")
    avoid_colors: List[str] = Field(default_factory=list, alias="avoidColors")
    style_preference: Optional[Literal["casual", "formal", "trendy", "classic"]] = Field(
        default=None, alias="stylePreference"
    )

    @field_validator("style_preference", mode="before")
    @classmethod
    def _lower_style(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    def to_domain(self) -> UserPreferences:
        return UserPreferences(
            favorite_colors=tuple(self.favorite_colors),
            avoid_colors=tuple(self.avoid_colors),
            style_preference=self.style_preference,
        )


class ContextInput(BaseModel):
    """Input contract for the recommendation context."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    occasion: Optional[str] = None
    weather: Optional[WeatherInput] = None
    time_of_day: Optional[Literal["morning", "afternoon", "evening", "night"]] = Field(
        default=None, alias="timeOfDay"
    )
    user_preferences: Optional[PreferencesInput] = Field(default=None, alias="userPreferences")

    @field_validator("time_of_day", mode="before")
    @classmethod
    def _lower_time(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("occasion", mode="before")
    @classmethod
    def _blank_occasion(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_domain(self) -> RecommendationContext:
        return RecommendationContext(
            occasion=self.occasion,
            weather=self.weather.to_domain() if self.weather else None,
            time_of_day=self.time_of_day,
            user_preferences=self.user_preferences.to_domain() if self.user_preferences else None,
        )


class RecommendationRequest(BaseModel):
    """Envelope for a payload-driven recommendation call.

    Items stay loose here so one bad record is skipped instead of rejecting
    the whole request.
    """

    items: List[Dict[str, Any]] = Field(default_factory=list)
    context: ContextInput = Field(default_factory=ContextInput)
    count: int = Field(default=3, ge=1, le=20)


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    return ValidationResult(message=message, details=details).model_dump()


def coerce_items(raw_items: Iterable[Dict[str, Any]]) -> List[WardrobeItem]:
    """Validate raw catalog records, skipping the ones that fail."""

    items: List[WardrobeItem] = []
    for raw in raw_items:
        try:
            items.append(WardrobeItemInput.model_validate(raw).to_domain())
        except ValidationError as exc:
            logger.warning("Skipping wardrobe entry due to validation error: %s", exc.errors())
    return items


def coerce_context(raw_context: Dict[str, Any] | None) -> RecommendationContext:
    return ContextInput.model_validate(raw_context or {}).to_domain()


__all__ = [
    "WardrobeItemInput",
    "WeatherInput",
    "PreferencesInput",
    "ContextInput",
    "RecommendationRequest",
    "ValidationResult",
    "validation_failure",
    "coerce_items",
    "coerce_context",
]
