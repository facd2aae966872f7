"""Application settings.

Values come from, highest priority first:

1. OS environment variables
2. the env file named by ``BOOKSHELF_ENV_FILE`` (relative paths resolve
   against the project root)
3. ``config/.env.dev``
4. ``config/.env``
5. field defaults

Only one env file is read. It is chosen when settings are built, not at
import time, so tests can point ``BOOKSHELF_ENV_FILE`` elsewhere and call
``clear_settings_cache()``.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

ENV_FILE_VARIABLE = "BOOKSHELF_ENV_FILE"
_DEFAULT_ENV_FILES = (".env.dev", ".env")
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _project_root() -> Path:
    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "pyproject.toml").is_file() or (parent / "config").is_dir():
            return parent
    return here.parents[2]


def get_config_dir() -> Path:
    return _project_root() / "config"


def find_env_file() -> Optional[Path]:
    """Return the env file to load, or None when there is none."""
    candidates: list[Path] = []

    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _project_root() / path)

    config_dir = get_config_dir()
    candidates.extend(config_dir / name for name in _DEFAULT_ENV_FILES)

    for candidate in candidates:
        if candidate.is_file():
            return candidate

    if explicit:
        logger.warning("%s points to a missing file: %s", ENV_FILE_VARIABLE, explicit)
    return None


class Settings(BaseSettings):
    """Typed configuration; field names map to upper-case env variables."""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required
    jwt_secret_key: SecretStr

    app_name: str = "Bookshelf"

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/bookshelf.db"
    database_echo: bool = False

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # Comma separated; empty disables CORS

    # JWT
    jwt_access_token_expire_hours: int = 24

    log_level: str = "INFO"

    @field_validator("jwt_secret_key")
    @classmethod
    def _secret_not_blank(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            msg = "JWT_SECRET_KEY must not be empty"
            raise ValueError(msg)
        return v

    @field_validator("jwt_access_token_expire_hours")
    @classmethod
    def _positive_lifetime(cls, v: int) -> int:
        if v <= 0:
            msg = "JWT_ACCESS_TOKEN_EXPIRE_HOURS must be positive"
            raise ValueError(msg)
        return v

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            msg = f"LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}"
            raise ValueError(msg)
        return level

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Build settings once per process.

    Raises a pydantic ``ValidationError`` when ``JWT_SECRET_KEY`` is
    missing or blank.
    """
    return Settings(_env_file=find_env_file())  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    get_settings.cache_clear()
