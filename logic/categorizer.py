"""Keyword classifier assigning each wardrobe item a closed category."""

from __future__ import annotations

from typing import Dict, Iterable, List

from models.taxonomy import CATEGORY_KEYWORDS, Category, display_name
from models.wardrobe_item import WardrobeItem


def categorize(item: WardrobeItem) -> Category:
    """Return the first category whose keywords appear in the item text.

    Only ``name``, ``description`` and ``tags`` are read; the catalog's own
    ``category`` label is ignored.
    """

    text = item.search_text
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return Category.OTHER


def categorize_wardrobe(items: Iterable[WardrobeItem]) -> Dict[Category, List[WardrobeItem]]:
    """Group items by derived category, preserving input order within groups."""

    grouped: Dict[Category, List[WardrobeItem]] = {}
    for item in items:
        grouped.setdefault(categorize(item), []).append(item)
    return grouped


def batch_categorize_items(items: Iterable[WardrobeItem]) -> Dict[str, Category]:
    """Map item names (``item-<index>`` when unnamed) to their category."""

    categorized: Dict[str, Category] = {}
    for index, item in enumerate(items):
        categorized[item.name or f"item-{index}"] = categorize(item)
    return categorized


def get_category_display_name(category: Category) -> str:
    return display_name(category)


__all__ = ["categorize", "categorize_wardrobe", "batch_categorize_items", "get_category_display_name"]
