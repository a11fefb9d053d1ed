"""Text generation client backed by Google Generative AI."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol, Sequence

from google import generativeai as genai

from aunty_app.config import AuntyConfig
from tools.observability import instrument_tool

logger = logging.getLogger(__name__)


class TextGenerationError(RuntimeError):
    """Raised when the language model cannot produce a reply."""


class TextGenerator(Protocol):
    """Interface the agents need from a language model."""

    def generate(self, prompt: str) -> str:
        ...

    def chat(self, history: Sequence[Dict[str, str]], message: str) -> str:
        ...


def to_gemini_history(history: Sequence[Dict[str, str]]) -> List[Dict[str, object]]:
    """Convert ``{"role", "content"}`` turns into Gemini chat contents.

    Gemini expects the conversation to open with a user turn and to alternate
    roles, so leading assistant turns are skipped and consecutive turns from the
    same speaker are merged.
    """

    contents: List[Dict[str, object]] = []
    for turn in history:
        role = "user" if turn.get("role") == "user" else "model"
        content = str(turn.get("content", "")).strip()
        if not content:
            continue
        if not contents and role == "model":
            continue
        if contents and contents[-1]["role"] == role:
            contents[-1]["parts"].append(content)  # type: ignore[union-attr]
            continue
        contents.append({"role": role, "parts": [content]})
    return contents


def _response_text(response: object) -> str:
    try:
        text = getattr(response, "text", None)
    except ValueError as exc:
        # Raised by the SDK when the candidate was blocked or empty.
        raise TextGenerationError(f"Model returned no text: {exc}") from exc
    if not text or not str(text).strip():
        raise TextGenerationError("Model returned an empty reply")
    return str(text)


class GeminiTextGenerator:
    """Calls a Gemini model with a fixed persona system instruction."""

    def __init__(self, config: AuntyConfig, system_instruction: str) -> None:
        self.config = config
        self.system_instruction = system_instruction
        self._model: Optional[genai.GenerativeModel] = None
        if self.config.api_key:
            genai.configure(api_key=self.config.api_key)

    def _get_model(self) -> genai.GenerativeModel:
        if not self.config.api_key:
            raise TextGenerationError("GOOGLE_API_KEY is not configured")
        if self._model is None:
            self._model = genai.GenerativeModel(
                model_name=self.config.model,
                system_instruction=self.system_instruction,
                generation_config={"temperature": self.config.temperature},
            )
        return self._model

    @instrument_tool("llm_generate")
    def generate(self, prompt: str) -> str:
        model = self._get_model()
        try:
            response = model.generate_content(prompt)
        except Exception as exc:  # noqa: BLE001
            raise TextGenerationError(f"Generation failed: {exc}") from exc
        return _response_text(response)

    @instrument_tool("llm_chat")
    def chat(self, history: Sequence[Dict[str, str]], message: str) -> str:
        model = self._get_model()
        try:
            session = model.start_chat(history=to_gemini_history(history))
            response = session.send_message(message)
        except Exception as exc:  # noqa: BLE001
            raise TextGenerationError(f"Chat failed: {exc}") from exc
        return _response_text(response)


__all__ = ["GeminiTextGenerator", "TextGenerationError", "TextGenerator", "to_gemini_history"]
