from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from healthinfo.core.constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_JSON_PREFIX,
    DEFAULT_LOG_LEVEL,
    ENV_PREFIX,
)
from healthinfo.core.exceptions import ConfigError


class Settings(BaseSettings):
    """Rendering and logging settings read from the environment or ``.env``."""

    json_prefix: str = DEFAULT_JSON_PREFIX
    json_indent: int = Field(default=DEFAULT_JSON_INDENT, ge=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = DEFAULT_LOG_LEVEL
    log_dir: Optional[Path] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def level_name_upper(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v

    model_config = {
        "env_prefix": ENV_PREFIX,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_settings: Optional[Settings] = None


def load_settings(env_path: Optional[Path | str] = None) -> Settings:
    """Build :class:`Settings`, loading *env_path* into the environment first."""
    if env_path is not None:
        env_path = Path(env_path)
        if not env_path.exists():
            raise ConfigError(f"Env file not found: {env_path}")
        load_dotenv(dotenv_path=env_path, override=True)

    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Settings validation failed: {exc}") from exc


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
