"""Configuration for Taskboard.

Settings live in ~/.taskboard/config.json (the directory can be moved with
TASKBOARD_HOME). Environment variables override individual values:

    TASKBOARD_HOST, TASKBOARD_PORT, TASKBOARD_API_URL, TASKBOARD_PAGE_SIZE,
    TASKBOARD_LOG_LEVEL, TASKBOARD_SEED, TASKBOARD_TIMEOUT,
    TASKBOARD_CORS_ORIGINS
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASKBOARD_"


class Settings(BaseModel):
    """Server and client settings."""

    host: str = "127.0.0.1"
    port: int = 8000
    api_url: str = "http://127.0.0.1:8000"
    page_size: int = Field(default=6, ge=1)
    log_level: str = "INFO"
    seed: bool = True
    timeout: float = 10.0
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )


def get_config_dir() -> Path:
    """Get the Taskboard config directory."""
    override = os.environ.get(f"{ENV_PREFIX}HOME")
    config_dir = Path(override).expanduser() if override else Path.home() / ".taskboard"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def _env_overrides() -> dict[str, object]:
    overrides: dict[str, object] = {}
    for name in Settings.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is None or raw.strip() == "":
            continue
        if name == "cors_origins":
            overrides[name] = [part.strip() for part in raw.split(",") if part.strip()]
        else:
            # pydantic coerces "8000" -> 8000 and "false" -> False
            overrides[name] = raw.strip()
    return overrides


def get_settings() -> Settings:
    """Load settings: defaults, then config.json, then environment."""
    data: dict[str, object] = {}
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            loaded = json.loads(config_file.read_text(encoding="utf-8"))
            if isinstance(loaded, dict):
                data.update(loaded)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable config file {config_file}: {e}")

    data.update(_env_overrides())
    try:
        return Settings(**data)
    except ValidationError as e:
        logger.warning(f"Invalid settings, using defaults: {e}")
        return Settings()


def save_settings(settings: Settings) -> None:
    """Save settings to config.json."""
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(settings.model_dump(), indent=2),
        encoding="utf-8",
    )
