"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def _clean_optional(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class WardrobeItem:
    """Represents an item in the user's wardrobe.

    Items are read-only inputs to the engine. ``category`` is the free-text
    label supplied by the catalog and is never trusted for matching; the
    engine derives its own category from the item text.
    """

    id: str
    name: str
    category: Optional[str] = None
    color: Optional[str] = None
    brand: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)
    wear_count: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "name", str(self.name or ""))
        object.__setattr__(self, "color", _clean_optional(self.color))
        object.__setattr__(self, "brand", _clean_optional(self.brand))
        object.__setattr__(
            self, "tags", tuple(str(tag).strip() for tag in _ensure_list(self.tags) if str(tag).strip())
        )
        if self.wear_count is not None:
            object.__setattr__(self, "wear_count", max(0, int(self.wear_count)))

    @property
    def times_worn(self) -> int:
        """Wear count with a missing value read as zero."""

        return self.wear_count or 0

    @property
    def is_unworn(self) -> bool:
        return self.times_worn == 0

    @property
    def search_text(self) -> str:
        """Lower-cased ``name description tags`` string used by keyword rules."""

        return f"{self.name} {self.description or ''} {' '.join(self.tags)}".lower()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "color": self.color,
            "brand": self.brand,
            "description": self.description,
            "image": self.image,
            "tags": list(self.tags),
            "wear_count": self.wear_count,
        }


def from_raw_metadata(metadata: Dict[str, Any]) -> WardrobeItem:
    """Factory to build a :class:`WardrobeItem` from a loose catalog record."""

    required_fields = ["id", "name"]
    missing = [name for name in required_fields if metadata.get(name) in (None, "")]
    if missing:
        raise ValueError(f"Missing required fields for WardrobeItem: {missing}")

    wear_count = metadata.get("wear_count")
    return WardrobeItem(
        id=str(metadata["id"]),
        name=str(metadata["name"]),
        category=metadata.get("category"),
        color=metadata.get("color"),
        brand=metadata.get("brand"),
        description=metadata.get("description"),
        image=metadata.get("image"),
        tags=tuple(_ensure_list(metadata.get("tags"))),
        wear_count=int(wear_count) if wear_count is not None else None,
    )


__all__ = ["WardrobeItem", "from_raw_metadata"]
