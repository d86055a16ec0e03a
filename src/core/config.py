"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI.
- Lets adapters (Management API, exporters) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "auth0-tf"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "auth0-tf"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "auth0-tf"
    return Path.home() / ".config" / "auth0-tf"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Values come from `AUTH0_*` environment variables, the project `.env` and
    the per-user `.env`, in that order of precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTH0_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    domain: str | None = Field(
        default=None,
        description="Tenant domain, e.g. 'example.eu.auth0.com'.",
    )
    access_token: str | None = Field(
        default=None,
        description="Management API access token.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="auth0-tf/0.1",
        min_length=1,
        description="User-Agent sent to the Management API.",
    )
    page_size: int = Field(
        default=50,
        ge=1,
        le=100,
        description="Items requested per page when listing resources.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Root log level (DEBUG, INFO, WARNING, ...).",
    )

    @property
    def api_base_url(self) -> str | None:
        """Management API base URL derived from `domain`, or None when unset."""

        if not self.domain:
            return None
        host = self.domain.strip()
        for scheme in ("https://", "http://"):
            if host.startswith(scheme):
                host = host[len(scheme):]
        host = host.strip("/")
        if not host:
            return None
        return f"https://{host}/api/v2/"
