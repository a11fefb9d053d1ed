"""Evaluation scenarios covering common image identifier shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class EvaluationScenario:
    name: str
    description: str
    identifier: str
    expected_slots: Dict[str, str | None] = field(default_factory=dict)
    expected_accessories: List[str] | None = None
    expected_items: List[str] | None = None
    min_confidence: float = 0.0


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="western_casual",
        description="Camera roll filename with jeans and sneakers.",
        identifier="my_blue_jeans_and_sneakers.jpg",
        expected_slots={"bottom": "Jeans", "footwear": "Footwear", "top": None, "dress": None, "outer": None},
        expected_accessories=[],
        expected_items=["jeans", "shoes"],
        min_confidence=0.5,
    ),
    EvaluationScenario(
        name="saree_with_blouse",
        description="Saree photo where the blouse has no slot of its own.",
        identifier="sari_blouse_photo.png",
        expected_slots={"dress": "Saree", "top": None},
        expected_accessories=["blouse"],
        expected_items=["saree", "blouse"],
        min_confidence=0.5,
    ),
    EvaluationScenario(
        name="office_layers",
        description="Hosted image URL describing a layered office look.",
        identifier="https://cdn.example.com/looks/shirt-trousers-blazer-watch.webp",
        expected_slots={"top": "Shirt", "bottom": "Trousers", "outer": "Blazer"},
        expected_accessories=["Watch"],
        expected_items=["shirt", "pants", "suit", "watch"],
        min_confidence=0.8,
    ),
    EvaluationScenario(
        name="onam_mundu",
        description="Festival photo with a kurta and mundu.",
        identifier="content://media/onam_kurta_mundu_2024.jpg",
        expected_slots={"top": "Kurta/Kurti", "bottom": "mundu"},
        expected_items=["mundu/lungi", "kurta/kurti"],
        min_confidence=0.5,
    ),
    EvaluationScenario(
        name="opaque_camera_name",
        description="Camera filename without any clothing words.",
        identifier="IMG_0001.JPG",
        expected_slots={"top": None, "bottom": None, "dress": None, "outer": None, "footwear": None},
        expected_accessories=[],
        expected_items=["outfit"],
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
