from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="KIB_LOG_LEVEL")
    snackbar_duration_seconds: int = Field(
        default=3, gt=0, validation_alias="KIB_SNACKBAR_DURATION"
    )
    theme: Literal["light", "dark"] = Field(
        default="light", validation_alias="KIB_THEME"
    )
    demo_delay_seconds: float = Field(
        default=0.1, ge=0, validation_alias="KIB_DEMO_DELAY"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, v: str) -> str:
        if v == "":
            return "INFO"
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )
