"""Lightweight evaluation harness for deterministic detection scenarios."""

from __future__ import annotations

from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.outfit_classifier import detect_outfit
from logic.quick_items import detect_items_heuristic
from models.outfit import DetectedOutfit


def _evaluate_expectations(
    scenario: EvaluationScenario, detected: DetectedOutfit, items: List[str]
) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    for slot, expected in scenario.expected_slots.items():
        checks[f"slot:{slot}"] = getattr(detected, slot) == expected
    if scenario.expected_accessories is not None:
        checks["accessories"] = detected.accessories == scenario.expected_accessories
    if scenario.expected_items is not None:
        checks["quick_items"] = items == scenario.expected_items
    checks["min_confidence"] = detected.confidence >= scenario.min_confidence
    checks["confidence_bounds"] = 0.0 <= detected.confidence <= 0.95
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario) -> Dict[str, object]:
    detected = detect_outfit(scenario.identifier)
    items = detect_items_heuristic(scenario.identifier)
    evaluation = _evaluate_expectations(scenario, detected, items)
    return {
        "scenario": scenario.name,
        "passed": evaluation["passed"],
        "checks": evaluation["checks"],
        "detection": detected.to_dict(),
        "quick_items": items,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
