"""Quick whole-word clothing detection producing a flat label list.

This is a coarser companion to :mod:`logic.outfit_classifier`. It covers more
regional and Western garment terms, returns plain category names, and never
comes back empty. Its vocabulary intentionally differs from the structured
classifier.
"""

from __future__ import annotations

import re
from typing import List, Pattern, Tuple

from models.vocabulary import normalize_text

FALLBACK_LABEL = "outfit"

_RULES: Tuple[Tuple[Pattern[str], str], ...] = tuple(
    (re.compile(pattern), label)
    for pattern, label in (
        # Indian wear
        (r"\b(saree|sari)\b", "saree"),
        (r"\b(mundu|lungi)\b", "mundu/lungi"),
        (r"\b(lehenga|ghagra)\b", "lehenga"),
        (r"\b(salwar kameez|salwar-kameez)\b", "salwar"),
        (r"\b(kurta|kurti|kurtha)\b", "kurta/kurti"),
        (r"\bblouse\b", "blouse"),
        (r"\b(dupatta|shawl|stole)\b", "dupatta"),
        (r"\bsherwani\b", "sherwani"),
        # Western wear
        (r"\b(t ?shirt|tee)\b", "t-shirt"),
        (r"\bshirt\b", "shirt"),
        (r"\b(jean|denim|jeans)\b", "jeans"),
        (r"\b(pant|trouser|pants|trousers)\b", "pants"),
        (r"\bshorts\b", "shorts"),
        (r"\bskirt\b", "skirt"),
        (r"\bdress\b", "dress"),
        (r"\bhoodie\b", "hoodie"),
        (r"\b(suit|blazer|coat)\b", "suit"),
        # Footwear
        (r"\b(shoe|sneaker|sneakers)\b", "shoes"),
        (r"\b(sandal|slipper|flipflop|flip flop)\b", "sandals"),
        # Accessories
        (r"\bwatch\b", "watch"),
        (r"\b(bag|backpack|purse)\b", "bag"),
        (r"\b(cap|hat|beanie)\b", "cap"),
        (r"\b(glasses|goggles|sunglass|sunglasses)\b", "glasses"),
    )
)
_SHERWANI = re.compile(r"\bsherwani\b")


def detect_items_heuristic(identifier: str) -> List[str]:
    """Return clothing category names mentioned in ``identifier``.

    Labels are deduplicated in rule order. ``["outfit"]`` is returned when no
    rule matches.
    """

    text = normalize_text(identifier)
    items: List[str] = []
    for pattern, label in _RULES:
        if not pattern.search(text):
            continue
        if label == "shirt" and _SHERWANI.search(text):
            continue
        if label not in items:
            items.append(label)
    if not items:
        items.append(FALLBACK_LABEL)
    return items


__all__ = ["FALLBACK_LABEL", "detect_items_heuristic"]
