from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConsoleSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Logging goes to stderr; prompts and reports own stdout.
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_format: str = Field(default="text", alias="LOG_FORMAT")
