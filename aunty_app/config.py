"""Configuration helpers for the Omana Aunty app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_GEMINI_MODEL = "models/gemini-1.5-flash-002"
ADDRESS_OPTIONS = ("neutral", "male", "female")


@dataclass
class AuntyConfig:
    """Configuration values for the aunty chat and outfit judge.

    Only the language model needs credentials; the outfit classifier itself is
    offline and needs no configuration.
    """

    model: str = DEFAULT_GEMINI_MODEL
    api_key: Optional[str] = None
    temperature: float = 0.9
    default_address_as: str = "neutral"
    session_store_backend: str = "memory"
    session_store_path: Optional[str] = None
    history_limit: int = 20
    environment: str | None = None

    def __post_init__(self) -> None:
        if self.default_address_as not in ADDRESS_OPTIONS:
            raise ValueError(
                f"Unsupported address preference '{self.default_address_as}'. Allowed: {list(ADDRESS_OPTIONS)}"
            )
        if self.history_limit <= 0:
            raise ValueError("history_limit must be positive")

    @classmethod
    def from_env(cls) -> "AuntyConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default. Environment variables win over file values so that secrets can
        be injected by the runtime.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("AUNTY_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        return cls(
            model=str(get_value("model", DEFAULT_GEMINI_MODEL) or DEFAULT_GEMINI_MODEL),
            api_key=get_value("google_api_key"),
            temperature=float(get_value("temperature", "0.9") or 0.9),
            default_address_as=str(get_value("default_address_as", "neutral") or "neutral").lower(),
            session_store_backend=str(get_value("session_store_backend", "memory") or "memory"),
            session_store_path=get_value("session_store_path"),
            history_limit=int(get_value("history_limit", "20") or 20),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal ``key: value`` YAML file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
