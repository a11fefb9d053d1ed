"""Canonical clothing vocabulary for outfit label inference.

This module centralises the raw garment tokens recognised per outfit slot and
the mapping from raw tokens to the display labels shown to users. Helper
functions keep token normalisation consistent between the structured outfit
classifier and the quick items detector.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_NON_ALNUM_RUN = re.compile(r"[^a-zA-Z0-9]+")

SLOTS: Tuple[str, ...] = ("top", "bottom", "dress", "outer", "footwear")

TOPS: Tuple[str, ...] = (
    "tshirt",
    "t-shirt",
    "tee",
    "shirt",
    "kurta",
    "kurti",
    "camisole",
    "tank top",
    "vest",
    "hoodie",
    "sweater",
    "jumper",
)
BOTTOMS: Tuple[str, ...] = ("jeans", "trouser", "pants", "pant", "shorts", "skirt", "dhoti", "mundu", "lungi")
DRESSES: Tuple[str, ...] = ("dress", "gown", "sari", "saree", "lehenga", "salwar", "anarkali")
OUTERS: Tuple[str, ...] = ("jacket", "coat", "blazer", "cardigan", "overcoat")
FOOTWEAR: Tuple[str, ...] = ("shoe", "shoes", "sneaker", "sneakers", "sandals", "slipper", "boots")
ACCESSORIES: Tuple[str, ...] = (
    "bag",
    "backpack",
    "watch",
    "cap",
    "hat",
    "scarf",
    "sunglasses",
    "glasses",
    "belt",
    "tie",
    "blouse",
)

# Scan order matters: the first vocabulary wins when filling a slot.
SLOT_VOCABULARIES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "top": TOPS,
        "bottom": BOTTOMS,
        "dress": DRESSES,
        "outer": OUTERS,
        "footwear": FOOTWEAR,
    }
)

_LABEL_GROUPS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("tshirt", "t-shirt", "tee"), "T-shirt"),
    (("shirt",), "Shirt"),
    (("kurta", "kurti"), "Kurta/Kurti"),
    (("jeans",), "Jeans"),
    (("trouser", "pants", "pant"), "Trousers"),
    (("shorts",), "Shorts"),
    (("skirt",), "Skirt"),
    (("sari", "saree"), "Saree"),
    (("dress",), "Dress"),
    (("lehenga",), "Lehenga"),
    (("salwar",), "Salwar"),
    (("shoe", "shoes", "sneaker", "sneakers", "boots", "sandals", "slipper"), "Footwear"),
    (("bag", "backpack"), "Bag/Backpack"),
    (("watch",), "Watch"),
    (("cap", "hat"), "Cap/Hat"),
    (("sunglasses", "glasses"), "Glasses"),
)

LABEL_MAP: Mapping[str, str] = MappingProxyType(
    {token: label for tokens, label in _LABEL_GROUPS for token in tokens}
)

# Outer layers keep their own name, just capitalised.
CAPITALISED_TOKENS = frozenset({"jacket", "coat", "blazer", "cardigan"})


def normalize_text(value: str) -> str:
    """Lower-case a string and turn every non-alphanumeric character into a space."""

    return _NON_ALNUM.sub(" ", (value or "").lower())


def normalize_token(value: str) -> str:
    """Normalise a matched token before looking it up in the vocabularies."""

    return normalize_text(value).strip()


def tokenize(identifier: str) -> List[str]:
    """Split an identifier on non-alphanumeric runs into unique lower-case tokens.

    Tokens keep their first-seen order.
    """

    tokens: List[str] = []
    seen = set()
    for part in _NON_ALNUM_RUN.split(identifier or ""):
        token = part.lower()
        if token and token not in seen:
            tokens.append(token)
            seen.add(token)
    return tokens


def slot_for_token(token: str) -> Optional[str]:
    """Return the outfit slot owning ``token`` or ``None`` for non-slot tokens."""

    for slot, vocabulary in SLOT_VOCABULARIES.items():
        if token in vocabulary:
            return slot
    return None


def canonical_label(token: str) -> str:
    """Map a raw token to its display label.

    Unknown tokens pass through unchanged.
    """

    if token in LABEL_MAP:
        return LABEL_MAP[token]
    if token in CAPITALISED_TOKENS:
        return token[:1].upper() + token[1:]
    return token


__all__ = [
    "SLOTS",
    "TOPS",
    "BOTTOMS",
    "DRESSES",
    "OUTERS",
    "FOOTWEAR",
    "ACCESSORIES",
    "SLOT_VOCABULARIES",
    "LABEL_MAP",
    "normalize_text",
    "normalize_token",
    "tokenize",
    "slot_for_token",
    "canonical_label",
]
