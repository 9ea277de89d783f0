"""Reconcile configuration between CLI arguments and environment variables."""

from pathlib import Path
from typing import TypeVar

import structlog

from changelog_manager.configuration.env import Settings, get_settings
from changelog_manager.configuration.exceptions import InvalidConfigurationElementError, RequiredConfigurationElementError
from changelog_manager.configuration.models import AddEntryConfig, InspectConfig

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

T = TypeVar("T")


def _prefer_cli(cli_value: T | None, env_value: T) -> T:
    """Return the CLI value when one was given, otherwise the environment value."""
    return env_value if cli_value is None else cli_value


async def reconcile_changelog_path(cli_changelog_path: Path | None, settings: Settings) -> Path:
    """Reconciles the changelog path.

    Raises:
        RequiredConfigurationElementError: If neither the CLI nor the environment provide a path.
    """
    changelog_path = _prefer_cli(cli_changelog_path, settings.CHANGELOG_PATH)
    if not str(changelog_path).strip():
        raise RequiredConfigurationElementError(name="Changelog path", cli_name="changelog_path", env_name="CHANGELOG_PATH")
    return Path(changelog_path)


async def reconcile_add_entry_configuration(
    cli_debug: bool | None = None,
    cli_changelog_path: Path | None = None,
    cli_title_token: str | None = None,
    cli_dry_run: bool = False,
    settings: Settings | None = None,
) -> AddEntryConfig:
    """Reconciles the configuration of the add-entry command.

    Args:
        cli_debug (bool | None): Debug flag from the command line.
        cli_changelog_path (Path | None): Changelog path from the command line.
        cli_title_token (str | None): Title token from the command line.
        cli_dry_run (bool): Whether to skip writing the changelog.
        settings (Settings | None): Environment settings. Loaded from the environment when omitted.

    Raises:
        RequiredConfigurationElementError: If a required element is missing.
        InvalidConfigurationElementError: If the chunk size is not positive.

    Returns:
        AddEntryConfig: The reconciled configuration.
    """
    if settings is None:
        settings = get_settings()

    if settings.CHANGELOG_CHUNK_SIZE <= 0:
        raise InvalidConfigurationElementError("CHANGELOG_CHUNK_SIZE", settings.CHANGELOG_CHUNK_SIZE, "must be a positive number of characters")

    title_token = _prefer_cli(cli_title_token, settings.CHANGELOG_TITLE_TOKEN)
    if not title_token:
        raise RequiredConfigurationElementError(name="Changelog title token", cli_name="title_token", env_name="CHANGELOG_TITLE_TOKEN")

    config = AddEntryConfig(
        debug=_prefer_cli(cli_debug, settings.DEBUG),
        changelog_path=await reconcile_changelog_path(cli_changelog_path, settings),
        title_token=title_token,
        chunk_size=settings.CHANGELOG_CHUNK_SIZE,
        issue_tracker_url=settings.ISSUE_TRACKER_URL,
        repository_url=settings.REPOSITORY_URL,
        profile_url=settings.PROFILE_URL,
        author=settings.CHANGELOG_AUTHOR,
        dry_run=cli_dry_run,
    )
    logger.debug("Reconciled add-entry configuration", changelog_path=str(config.changelog_path), dry_run=config.dry_run)
    return config


async def reconcile_inspect_configuration(
    cli_debug: bool | None = None,
    cli_changelog_path: Path | None = None,
    settings: Settings | None = None,
) -> InspectConfig:
    """Reconciles the configuration of the inspect command."""
    if settings is None:
        settings = get_settings()

    return InspectConfig(
        debug=_prefer_cli(cli_debug, settings.DEBUG),
        changelog_path=await reconcile_changelog_path(cli_changelog_path, settings),
        unpublished_heading=settings.CHANGELOG_UNPUBLISHED_HEADING,
    )
