"""Tests for the outfit judge agent."""

from __future__ import annotations

from agents.outfit_judge import OutfitJudgeAgent
from logic.safety import JUDGE_RETRY_MESSAGE


def test_judge_returns_trimmed_roast_and_detection(config, fake_generator) -> None:
    agent = OutfitJudgeAgent(config=config, generator=fake_generator)

    result = agent.judge("my_blue_jeans_and_sneakers.jpg", address_as="male")

    assert result["status"] == "ok"
    assert result["roast"] == "Aiyyo, nice choice mone!"
    assert result["items"] == ["Jeans", "Footwear"]
    assert result["detection"]["bottom"] == "Jeans"
    prompt = fake_generator.prompts[-1]
    assert "chetta" in prompt
    assert "Jeans, Footwear" in prompt


def test_judge_uses_quick_items_when_nothing_structured(config, fake_generator) -> None:
    agent = OutfitJudgeAgent(config=config, generator=fake_generator)

    result = agent.judge("IMG_0001.JPG")

    assert result["items"] == ["outfit"]
    assert "mone/mole" in fake_generator.prompts[-1]
    assert result["address_as"] == "neutral"


def test_judge_failure_returns_retry_message(config, failing_generator) -> None:
    agent = OutfitJudgeAgent(config=config, generator=failing_generator)

    result = agent.judge("saree.jpg", address_as="female")

    assert result["status"] == "error"
    assert result["roast"] == JUDGE_RETRY_MESSAGE
    assert result["detection"]["dress"] == "Saree"


def test_judge_rejects_invalid_request(config, fake_generator) -> None:
    agent = OutfitJudgeAgent(config=config, generator=fake_generator)

    result = agent.judge("", address_as="neutral")

    assert result["status"] == "needs_review"
    assert result["details"]
    assert fake_generator.prompts == []


def test_judge_without_api_key_degrades(config) -> None:
    agent = OutfitJudgeAgent(config=config)

    result = agent.judge("kurta.jpg")

    assert result["status"] == "error"
    assert result["roast"] == JUDGE_RETRY_MESSAGE
