# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Application configuration using pydantic-settings.

Values come from MILAPPS_* environment variables or a local .env file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from militaryapps.comms.geomessage import DEFAULT_WKID
from militaryapps.comms.message_controller import DEFAULT_BROADCAST_HOST, DEFAULT_MESSAGE_PORT


class Settings(BaseSettings):
    """Messaging settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MILAPPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Transport
    message_host: str = DEFAULT_BROADCAST_HOST
    message_port: int = Field(default=DEFAULT_MESSAGE_PORT, ge=1, le=65535)

    # Reports
    default_wkid: int = Field(default=DEFAULT_WKID, gt=0)
    unique_designation: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
