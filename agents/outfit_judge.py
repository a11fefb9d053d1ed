"""Outfit judge agent: heuristic clothing detection plus an aunty-style roast."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from pydantic import ValidationError

from aunty_app.config import AuntyConfig
from aunty_app.logging_config import get_logger, log_event, operation_context
from logic.outfit_classifier import detect_outfit
from logic.quick_items import detect_items_heuristic
from logic.safety import JUDGE_RETRY_MESSAGE, address_form, system_instruction
from logic.validation import JudgeRequest, validation_failure
from tools.llm import GeminiTextGenerator, TextGenerationError, TextGenerator

logger = get_logger(__name__)


class OutfitJudgeAgent:
    """Detects clothing from an image identifier and asks the model for a roast.

    Detection is deterministic and offline. Only the roast needs the language
    model, and a failed call degrades to a localized retry message instead of
    an exception.
    """

    def __init__(self, config: AuntyConfig, generator: Optional[TextGenerator] = None) -> None:
        self.config = config
        self.system_instruction = system_instruction(
            "judging someone's outfit. Roast it with affection, praise one thing, suggest one fix"
        )
        self.generator = generator or GeminiTextGenerator(config, self.system_instruction)

    def build_prompt(self, items: List[str], address_as: str) -> str:
        """Compose the roast request from detected items and the chosen address form."""

        form = address_form(address_as)
        item_text = ", ".join(items) if items else "an outfit you cannot quite make out"
        return (
            f"Address the user as '{form}'.\n"
            f"Clothing items spotted: {item_text}.\n"
            "Give your honest aunty verdict on this outfit."
        )

    def judge(self, image_uri: str, address_as: Optional[str] = None) -> Dict[str, object]:
        """Return the roast together with the detection it was based on."""

        try:
            request = JudgeRequest(
                image_uri=image_uri,
                address_as=address_as or self.config.default_address_as,
            )
        except ValidationError as exc:
            log_event(logger, logging.WARNING, "judge_request_invalid", agent="outfit_judge", details=str(exc))
            return validation_failure("Invalid outfit judge request", exc)

        with operation_context("agent:outfit_judge.judge") as correlation_id:
            detected = detect_outfit(request.image_uri)
            items = detected.items or detect_items_heuristic(request.image_uri)
            log_event(
                logger,
                logging.INFO,
                "agent_call_started",
                agent="outfit_judge",
                method="judge",
                correlation_id=correlation_id,
                items=items,
                confidence=detected.confidence,
            )

            status = "ok"
            try:
                roast = self.generator.generate(self.build_prompt(items, request.address_as)).strip()
            except TextGenerationError as exc:
                log_event(
                    logger,
                    logging.WARNING,
                    "judge_generation_failed",
                    agent="outfit_judge",
                    correlation_id=correlation_id,
                    details=str(exc),
                )
                status = "error"
                roast = JUDGE_RETRY_MESSAGE

            log_event(
                logger,
                logging.INFO,
                "agent_call_completed",
                agent="outfit_judge",
                method="judge",
                correlation_id=correlation_id,
                status=status,
            )
            return {
                "status": status,
                "roast": roast,
                "address_as": request.address_as,
                "items": items,
                "detection": detected.to_dict(),
            }


__all__ = ["OutfitJudgeAgent"]
