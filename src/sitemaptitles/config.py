"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `SITEMAP_TITLES_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """sitemap-titles settings.

    All fields are environment-configurable. Prefix is `SITEMAP_TITLES_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="SITEMAP_TITLES_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")

    # Networking
    http_timeout_s: float = Field(default=30.0, gt=0.0)
    # Unset means no User-Agent override; the client default is sent.
    http_user_agent: str | None = Field(default=None)

    # Output
    output_dir: Path = Field(default=Path("output"))
    output_prefix: str = Field(default="page-titles", min_length=1)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("SITEMAP_TITLES_ENV_FILE")
    if env_file_override:
        return Settings(_env_file=Path(env_file_override))

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
