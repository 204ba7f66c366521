"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking
  them into the CLI.
- Endpoints and the output path are passed explicitly to the fetch
  pipeline and the JSON exporter, so tests can inject a mock transport
  and a temporary file.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_APP_DIR_NAME = "placeholder-join"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / _APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / _APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / _APP_DIR_NAME
    return Path.home() / ".config" / _APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without polluting the core.
    - A single configuration contract shared by the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PLACEHOLDER_JOIN_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the per-user global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    users_url: str = Field(
        default="https://jsonplaceholder.typicode.com/users",
        min_length=8,
        description="Endpoint returning the JSON array of users.",
    )
    posts_url: str = Field(
        default="https://jsonplaceholder.typicode.com/posts",
        min_length=8,
        description="Endpoint returning the JSON array of posts.",
    )
    comments_url: str = Field(
        default="https://jsonplaceholder.typicode.com/comments",
        min_length=8,
        description="Endpoint returning the JSON array of comments.",
    )

    output_path: Path = Field(
        default=Path("data.json"),
        description="File the aggregate is written to and read back from.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="placeholder-join/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    log_level: LogLevel = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
