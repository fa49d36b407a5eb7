"""
Application settings for RetroGrid.

This module defines the revision engine defaults using Pydantic BaseSettings.
Components read these values only as constructor defaults.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings using Pydantic BaseSettings."""

    # Revision actions
    default_show_title: str = Field(default="Los Simpson", alias="DEFAULT_SHOW_TITLE")
    merge_titles: list[str] = Field(
        default_factory=lambda: ["Impacto Total", "Buen Dia"],
        alias="MERGE_TITLES",
    )
    rating_window: int = Field(default=5, ge=1, alias="RATING_WINDOW")

    # Creation notifications
    mail_sender: str = Field(default="programacion@retrogrid.tv", alias="MAIL_SENDER")
    sponsor_escalation_address: str = Field(
        default="gerencia@retrogrid.tv", alias="SPONSOR_ESCALATION_ADDRESS"
    )
    sponsor_escalation_threshold: int = Field(
        default=100_000, alias="SPONSOR_ESCALATION_THRESHOLD"
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    env: str = Field(default="dev", alias="ENV")  # dev|prod|test

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


def load_settings() -> Settings:
    """Settings from the environment and ./.env, or from RETROGRID_ENV_FILE when it names a file."""
    env_file = os.getenv("RETROGRID_ENV_FILE")
    if env_file and Path(env_file).is_file():
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


settings = load_settings()
