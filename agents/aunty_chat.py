"""Conversational agent for chatting with Omana aunty."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from aunty_app.config import AuntyConfig
from aunty_app.logging_config import get_logger, log_event, operation_context
from logic.safety import CHAT_GREETING, CHAT_RETRY_MESSAGE, system_instruction
from memory.session_store import SessionManager
from tools.llm import GeminiTextGenerator, TextGenerationError, TextGenerator

LOGGER = get_logger(__name__)


class AuntyChatAgent:
    """Keeps per-session history and relays each message to the model.

    Every session opens with aunty's greeting. When the model call fails the
    user still gets an in-character retry message, and that message is stored
    like any other reply so the history keeps alternating speakers.
    """

    def __init__(
        self,
        config: AuntyConfig,
        session_manager: SessionManager,
        generator: Optional[TextGenerator] = None,
    ) -> None:
        self.config = config
        self.session_manager = session_manager
        self.system_instruction = system_instruction(
            "chatting with a young relative. Ask about studies, marks, jobs and marriage plans, "
            f"and react to their answers. You opened the chat with: \"{CHAT_GREETING}\""
        )
        self.generator = generator or GeminiTextGenerator(config, self.system_instruction)

    def start_session(self, user_id: str, metadata: Dict[str, Any] | None = None) -> str:
        session_id = self.session_manager.start_session(user_id=user_id, metadata=metadata)
        self.session_manager.record_turn(session_id, role="assistant", content=CHAT_GREETING)
        return session_id

    def reply(self, session_id: str, message: str) -> Dict[str, Any]:
        """Send one user message and return aunty's reply.

        Raises:
            ValueError: If the message is blank or the session is unknown.
        """

        text = (message or "").strip()
        if not text:
            raise ValueError("Message cannot be empty")

        with operation_context("agent:aunty_chat.reply", session_id=session_id) as correlation_id:
            history = self.session_manager.get_history(session_id)
            self.session_manager.record_turn(session_id, role="user", content=text)
            log_event(
                LOGGER,
                logging.INFO,
                "agent_call_started",
                agent="aunty_chat",
                method="reply",
                session_id=session_id,
                correlation_id=correlation_id,
                history_turns=len(history),
            )

            status = "ok"
            try:
                reply = self.generator.chat(history, text).strip()
            except TextGenerationError as exc:
                log_event(
                    LOGGER,
                    logging.WARNING,
                    "chat_generation_failed",
                    agent="aunty_chat",
                    session_id=session_id,
                    correlation_id=correlation_id,
                    details=str(exc),
                )
                status = "error"
                reply = CHAT_RETRY_MESSAGE

            self.session_manager.record_turn(session_id, role="assistant", content=reply)
            log_event(
                LOGGER,
                logging.INFO,
                "agent_call_completed",
                agent="aunty_chat",
                method="reply",
                session_id=session_id,
                correlation_id=correlation_id,
                status=status,
            )
            return {"status": status, "session_id": session_id, "reply": reply}

    def history(self, session_id: str) -> list:
        return self.session_manager.get_history(session_id)


__all__ = ["AuntyChatAgent"]
