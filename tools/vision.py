"""Vision tool entry points.

Both functions are coroutines so callers do not change when the heuristics are
swapped for a network-backed vision model. Today they only read the image
identifier and never await anything.

We do NOT infer sensitive attributes (like gender) from images.
"""

from __future__ import annotations

from logic.outfit_classifier import detect_outfit as classify_identifier
from logic.quick_items import detect_items_heuristic
from models.outfit import DetectedOutfit, OutfitDetection
from tools.observability import instrument_tool


@instrument_tool("detect_outfit")
async def detect_outfit(uri: str) -> DetectedOutfit:
    """Return the structured outfit description for an image URI."""

    return classify_identifier(uri)


@instrument_tool("detect_outfit_items")
async def detect_outfit_items(uri: str) -> OutfitDetection:
    """Return the flat list of clothing labels for an image URI."""

    return OutfitDetection(items=detect_items_heuristic(uri))


__all__ = ["detect_outfit", "detect_outfit_items"]
