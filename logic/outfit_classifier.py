"""Rule-based outfit label inference from image identifiers.

The classifier never looks at pixels. It reads clothing words out of whatever
text accompanies an image (a filename, a URI or a caption) and slots them into
a :class:`DetectedOutfit`.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from models.outfit import DetectedOutfit
from models.vocabulary import (
    ACCESSORIES,
    SLOT_VOCABULARIES,
    canonical_label,
    normalize_token,
    slot_for_token,
    tokenize,
)

logger = logging.getLogger(__name__)

CONFIDENCE_FLOOR = 0.15
CONFIDENCE_STEP = 0.18
CONFIDENCE_CEILING = 0.95
MAX_FALLBACK_LABELS = 5


def _find_tokens(identifier: str, candidates: List[str]) -> List[str]:
    """Collect vocabulary tokens present in the identifier, in scan order."""

    lowered = (identifier or "").lower()
    candidate_set = set(candidates)
    found: List[str] = []
    for vocabulary in (*SLOT_VOCABULARIES.values(), ACCESSORIES):
        for token in vocabulary:
            if token in candidate_set or token in lowered:
                found.append(token)
    return found


def _assign_slots(found: List[str]) -> tuple[Dict[str, Optional[str]], List[str]]:
    slots: Dict[str, Optional[str]] = {slot: None for slot in SLOT_VOCABULARIES}
    accessories: List[str] = []
    for token in found:
        key = normalize_token(token)
        slot = slot_for_token(key)
        if slot is not None:
            # A second token for a filled slot is dropped.
            if slots[slot] is None:
                slots[slot] = canonical_label(key)
            continue
        # Accessories, plus tokens that stop matching once normalised (e.g. "t-shirt").
        accessories.append(canonical_label(key))
    return slots, accessories


def _dedupe(values: List[str]) -> List[str]:
    unique: List[str] = []
    for value in values:
        if value and value not in unique:
            unique.append(value)
    return unique


def score_confidence(filled_slots: int, accessory_count: int) -> float:
    """Linear evidence score capped at :data:`CONFIDENCE_CEILING`."""

    return min(CONFIDENCE_CEILING, CONFIDENCE_FLOOR + CONFIDENCE_STEP * (filled_slots + accessory_count))


def _last_resort_guess(identifier: str, slots: Dict[str, Optional[str]]) -> None:
    guess = (identifier or "").lower()
    if "sari" in guess or "saree" in guess:
        slots["dress"] = "Saree"
    elif "dress" in guess:
        slots["dress"] = "Dress"
    elif "shirt" in guess:
        slots["top"] = "Shirt"
    elif "jeans" in guess:
        slots["bottom"] = "Jeans"


def detect_outfit(identifier: str) -> DetectedOutfit:
    """Infer a structured outfit description from an image identifier.

    Args:
        identifier: Any string tied to the image, usually its URI or filename.

    Returns:
        A fresh :class:`DetectedOutfit`. The function never raises; inputs
        without clothing words degrade to an empty description at the
        confidence floor.
    """

    identifier = identifier or ""
    candidates = tokenize(identifier)
    found = _find_tokens(identifier, candidates)
    slots, accessories = _assign_slots(found)
    accessories = _dedupe(accessories)

    filled = sum(1 for value in slots.values() if value)
    confidence = score_confidence(filled, len(accessories))

    if filled == 0 and not accessories:
        _last_resort_guess(identifier, slots)

    raw_labels = list(found) if found else candidates[:MAX_FALLBACK_LABELS]

    outfit = DetectedOutfit(
        **slots,
        accessories=accessories,
        raw_labels=raw_labels,
        confidence=confidence,
    )
    logger.debug(
        "Detected outfit from identifier",
        extra={"raw_labels": outfit.raw_labels, "items": outfit.items, "confidence": confidence},
    )
    return outfit


__all__ = [
    "CONFIDENCE_CEILING",
    "CONFIDENCE_FLOOR",
    "CONFIDENCE_STEP",
    "detect_outfit",
    "score_confidence",
]
