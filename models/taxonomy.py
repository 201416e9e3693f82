"""Canonical taxonomy definitions for wardrobe items.

This module centralises the closed category set, the keyword tables used to
classify free-text items and the color tables shared by matching and harmony
analysis. Keeping them here means every rule reads from one static source.
"""

from enum import Enum
from typing import Dict, FrozenSet, Tuple


class Category(str, Enum):
    """Closed set of garment categories derived from item text."""

    TOP = "top"
    BOTTOM = "bottom"
    OUTERWEAR = "outerwear"
    DRESS = "dress"
    SHOES = "shoes"
    ACCESSORY = "accessory"
    OTHER = "other"


# Order matters: the first group with a matching keyword wins.
CATEGORY_KEYWORDS: Tuple[Tuple[Category, Tuple[str, ...]], ...] = (
    (
        Category.SHOES,
        ("shoe", "boot", "sneaker", "sandal", "heel", "pump", "loafer", "oxford", "ankle boot", "footwear"),
    ),
    (Category.DRESS, ("dress", "gown", "maxi", "midi dress", "mini dress")),
    (
        Category.OUTERWEAR,
        (
            "jacket",
            "coat",
            "blazer",
            "cardigan",
            "sweater",
            "hoodie",
            "parka",
            "trench",
            "bomber",
            "denim jacket",
            "leather jacket",
            "outerwear",
        ),
    ),
    (
        Category.BOTTOM,
        ("pant", "jean", "trouser", "short", "skirt", "legging", "bottom", "cargo", "chino"),
    ),
    (
        Category.ACCESSORY,
        (
            "bag",
            "purse",
            "belt",
            "scarf",
            "hat",
            "jewelry",
            "necklace",
            "bracelet",
            "earring",
            "watch",
            "sunglasses",
            "accessory",
        ),
    ),
    (
        Category.TOP,
        ("shirt", "blouse", "top", "tee", "t-shirt", "tank", "cami", "polo", "tunic", "crop"),
    ),
)

CATEGORY_DISPLAY_NAMES: Dict[Category, str] = {
    Category.TOP: "Top",
    Category.BOTTOM: "Bottom",
    Category.OUTERWEAR: "Outerwear",
    Category.DRESS: "Dress",
    Category.SHOES: "Shoes",
    Category.ACCESSORY: "Accessory",
    Category.OTHER: "Other",
}

NEUTRAL_COLORS: FrozenSet[str] = frozenset({"black", "white", "gray", "beige", "navy", "brown", "cream"})

_SHADED_COLORS = ("blue", "gray", "green", "red")

COLOR_SYNONYMS: Dict[str, str] = {
    "grey": "gray",
    "dark grey": "gray",
    "light grey": "gray",
    **{f"{shade} {color}": color for color in _SHADED_COLORS for shade in ("dark", "light")},
}

# One direction per entry; lookups check both directions.
COMPLEMENTARY_COLORS: Dict[str, FrozenSet[str]] = {
    "red": frozenset({"green", "white", "black"}),
    "blue": frozenset({"orange", "yellow", "white"}),
    "yellow": frozenset({"blue", "purple", "black"}),
    "green": frozenset({"red", "pink", "white"}),
    "pink": frozenset({"green", "white", "black"}),
    "purple": frozenset({"yellow", "white", "black"}),
    "orange": frozenset({"blue", "white", "black"}),
}


def normalize_color_name(raw_string: str) -> str:
    """Map a raw color string to a canonical color name."""

    key = " ".join(raw_string.strip().lower().split())
    return COLOR_SYNONYMS.get(key, key)


def is_neutral(color: str) -> bool:
    return color in NEUTRAL_COLORS


def display_name(category: Category) -> str:
    return CATEGORY_DISPLAY_NAMES[category]


__all__ = [
    "Category",
    "CATEGORY_KEYWORDS",
    "CATEGORY_DISPLAY_NAMES",
    "NEUTRAL_COLORS",
    "COLOR_SYNONYMS",
    "COMPLEMENTARY_COLORS",
    "normalize_color_name",
    "is_neutral",
    "display_name",
]
