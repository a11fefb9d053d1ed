"""App bootstrap wiring config, logging, session storage and agents."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from agents.aunty_chat import AuntyChatAgent
from agents.outfit_judge import OutfitJudgeAgent
from aunty_app.config import AuntyConfig
from aunty_app.logging_config import configure_logging, get_logger, log_event
from memory.session_store import SessionManager, build_session_store
from tools.llm import TextGenerator

LOGGER = get_logger(__name__)


class OmanaAuntyApp:
    """Wires together the chat and outfit judge agents."""

    def __init__(
        self,
        config: AuntyConfig | None = None,
        generator: Optional[TextGenerator] = None,
    ) -> None:
        self.config = config or AuntyConfig.from_env()
        configure_logging()

        self.session_store = build_session_store(
            self.config.session_store_backend, self.config.session_store_path
        )
        self.session_manager = SessionManager(store=self.session_store, history_keep=self.config.history_limit)
        self.outfit_judge = OutfitJudgeAgent(config=self.config, generator=generator)
        self.chat_agent = AuntyChatAgent(
            config=self.config, session_manager=self.session_manager, generator=generator
        )
        log_event(
            LOGGER,
            logging.INFO,
            "app_initialised",
            model=self.config.model,
            session_store=self.config.session_store_backend,
            environment=self.config.environment or "local",
        )

    def judge_outfit(self, image_uri: str, address_as: str | None = None) -> Dict[str, Any]:
        return self.outfit_judge.judge(image_uri, address_as=address_as)

    def start_chat(self, user_id: str, metadata: dict | None = None) -> str:
        """Create a chat session that already contains aunty's greeting."""

        return self.chat_agent.start_session(user_id=user_id, metadata=metadata)

    def chat(self, session_id: str, message: str) -> Dict[str, Any]:
        return self.chat_agent.reply(session_id, message)


__all__ = ["OmanaAuntyApp"]
