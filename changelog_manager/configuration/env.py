"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from changelog_manager.utils.constants import (
    DEFAULT_AUTHOR,
    DEFAULT_CHANGELOG_PATH,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_ISSUE_TRACKER_URL,
    DEFAULT_PROFILE_URL,
    DEFAULT_REPOSITORY_URL,
    DEFAULT_TITLE_TOKEN,
    UNPUBLISHED_HEADING,
)


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # Changelog document settings
    CHANGELOG_PATH: Path = Path(DEFAULT_CHANGELOG_PATH)
    CHANGELOG_TITLE_TOKEN: str = DEFAULT_TITLE_TOKEN
    CHANGELOG_UNPUBLISHED_HEADING: str = UNPUBLISHED_HEADING
    CHANGELOG_CHUNK_SIZE: int = DEFAULT_CHUNK_SIZE

    # Entry link settings
    ISSUE_TRACKER_URL: str = DEFAULT_ISSUE_TRACKER_URL
    REPOSITORY_URL: str = DEFAULT_REPOSITORY_URL
    PROFILE_URL: str = DEFAULT_PROFILE_URL
    CHANGELOG_AUTHOR: str = DEFAULT_AUTHOR


def get_settings() -> Settings:
    """Load settings from the environment and the .env file."""
    return Settings()
