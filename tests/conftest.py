"""Shared fixtures: a scripted text generator so no test reaches the network."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Dict, List, Sequence

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from aunty_app.config import AuntyConfig  # noqa: E402
from tools.llm import TextGenerationError  # noqa: E402


class FakeGenerator:
    """Records prompts and returns canned replies, or fails on demand."""

    def __init__(self, reply: str = "  Aiyyo, nice choice mone!  ", fail: bool = False) -> None:
        self.reply = reply
        self.fail = fail
        self.prompts: List[str] = []
        self.chats: List[Dict[str, object]] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.fail:
            raise TextGenerationError("model unavailable")
        return self.reply

    def chat(self, history: Sequence[Dict[str, str]], message: str) -> str:
        self.chats.append({"history": [dict(turn) for turn in history], "message": message})
        if self.fail:
            raise TextGenerationError("model unavailable")
        return self.reply


@pytest.fixture()
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture()
def failing_generator() -> FakeGenerator:
    return FakeGenerator(fail=True)


@pytest.fixture()
def config() -> AuntyConfig:
    return AuntyConfig(api_key=None)
