"""Environment-based settings.

This module handles only simple environment variables (strings, numbers).
Structured application configuration lives in config.yaml and is parsed by
``runtime.config``; the values here locate that file and override a few
commonly changed entries.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.specials_api.runtime.config.config_data import ConfigData


class EnvironmentSettings(BaseSettings):
    """Settings that come from environment variables."""

    config_file: str = Field(default="config.yaml", validation_alias="APP_CONFIG_FILE")
    environment: Literal["development", "production", "test"] | None = Field(
        default=None, validation_alias="APP_ENVIRONMENT"
    )
    database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")
    log_level: str | None = Field(default=None, validation_alias="LOG_LEVEL")
    port: int | None = Field(default=None, validation_alias="PORT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    def apply(self, config: ConfigData) -> ConfigData:
        """Return a copy of ``config`` with the environment overrides applied."""
        app = config.app
        if self.environment is not None or self.port is not None:
            app = app.model_copy(
                update={
                    k: v
                    for k, v in (("environment", self.environment), ("port", self.port))
                    if v is not None
                }
            )
        database = config.database
        if self.database_url is not None:
            database = database.model_copy(update={"url": self.database_url})
        logging_config = config.logging
        if self.log_level is not None:
            logging_config = logging_config.model_copy(update={"level": self.log_level})
        return config.model_copy(
            update={"app": app, "database": database, "logging": logging_config}
        )
