"""Application configuration, read from `MODMAIL_VIEWER_*` environment variables.

The release repository and feed endpoint are constants of the GitHub adapter,
not settings.
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
        return base / "modmail-viewer"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "modmail-viewer"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "modmail-viewer"
    return Path.home() / ".config" / "modmail-viewer"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings (env vars, project `.env`, per-user `.env`)."""

    model_config = SettingsConfigDict(
        env_prefix="MODMAIL_VIEWER_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the per-user one (installed builds).
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="modmail-viewer-update-check/0.1",
        min_length=1,
        description="User-Agent sent to the GitHub API (required by GitHub).",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(?i:debug|info|warning|error|critical)$",
        description="Root log level used by the CLI.",
    )

    build_tag: str | None = Field(
        default=None,
        description="Tag the running build was produced from, if any (e.g. '1.4.0').",
    )
    build_branch: str | None = Field(
        default=None,
        description="Branch the running build was produced from (e.g. 'develop').",
    )
