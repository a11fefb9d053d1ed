"""Tests for environment and file based configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from aunty_app.config import DEFAULT_GEMINI_MODEL, AuntyConfig

_ENV_KEYS = [
    "APP_ENV",
    "APP_CONFIG_PATH",
    "GOOGLE_API_KEY",
    "MODEL",
    "TEMPERATURE",
    "DEFAULT_ADDRESS_AS",
    "SESSION_STORE_BACKEND",
    "SESSION_STORE_PATH",
    "HISTORY_LIMIT",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_environment() -> None:
    config = AuntyConfig.from_env()

    assert config.model == DEFAULT_GEMINI_MODEL
    assert config.api_key is None
    assert config.default_address_as == "neutral"
    assert config.session_store_backend == "memory"
    assert config.history_limit == 20


def test_yaml_file_with_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "staging.yaml"
    path.write_text(
        "# staging settings\n"
        "model: \"models/gemini-test\"\n"
        "default_address_as: female\n"
        "history_limit: 6\n"
        "temperature: '0.4'\n"
    )
    monkeypatch.setenv("APP_CONFIG_PATH", str(path))
    monkeypatch.setenv("HISTORY_LIMIT", "12")
    monkeypatch.setenv("GOOGLE_API_KEY", "secret")

    config = AuntyConfig.from_env()

    assert config.model == "models/gemini-test"
    assert config.default_address_as == "female"
    assert config.temperature == pytest.approx(0.4)
    assert config.history_limit == 12
    assert config.api_key == "secret"


def test_environment_name_selects_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / "prod.yaml").write_text("session_store_backend: json\n")
    monkeypatch.setenv("APP_ENV", "prod")
    monkeypatch.setenv("AUNTY_CONFIG_DIR", str(tmp_path))

    config = AuntyConfig.from_env()

    assert config.environment == "prod"
    assert config.session_store_backend == "json"


def test_invalid_address_preference_rejected() -> None:
    with pytest.raises(ValueError):
        AuntyConfig(default_address_as="auntie")
