"""Configuration module - environment driven settings for the CLI."""

import logging
from functools import cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.project import get_project_root
from config.runtime import RuntimeConfig

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Main configuration container for the CLI process."""

    # Configuration root override, e.g. for tests or alternate installs
    home_path: Path | None = Field(None, alias="VALET_HOME_PATH")

    # Runtime configurations
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    model_config = SettingsConfigDict(
        env_file=get_project_root() / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@cache
def get_config() -> Config:
    """Get the process-wide configuration instance."""
    return Config()
