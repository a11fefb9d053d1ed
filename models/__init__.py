"""Model package exports."""

from models.outfit import DetectedOutfit, OutfitDetection
from models.vocabulary import *  # noqa: F401,F403

__all__ = ["DetectedOutfit", "OutfitDetection"]
