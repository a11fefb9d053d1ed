"""Outfit detection results."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from models.vocabulary import SLOTS


@dataclass
class DetectedOutfit:
    """Structured outfit description inferred from an image identifier.

    Each positional slot holds at most one canonical label. ``raw_labels`` keeps
    the matched tokens before canonicalisation for debugging, and ``confidence``
    is a heuristic score, not a probability.
    """

    top: Optional[str] = None
    bottom: Optional[str] = None
    dress: Optional[str] = None
    outer: Optional[str] = None
    footwear: Optional[str] = None
    accessories: List[str] = field(default_factory=list)
    raw_labels: List[str] = field(default_factory=list)
    confidence: float = 0.0

    @property
    def items(self) -> List[str]:
        """Filled slots in slot order followed by accessories."""

        filled = [getattr(self, slot) for slot in SLOTS if getattr(self, slot)]
        return filled + list(self.accessories)

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["items"] = self.items
        return payload


@dataclass
class OutfitDetection:
    """Flat list of detected clothing labels."""

    items: List[str] = field(default_factory=list)
    caption: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["DetectedOutfit", "OutfitDetection"]
