"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio
from pathlib import Path

from changelog_manager.configuration import reconcile
from changelog_manager.configuration.models import AddEntryConfig, InspectConfig


def get_add_entry_config(
    debug: bool | None = None,
    changelog_path: Path | None = None,
    title_token: str | None = None,
    dry_run: bool = False,
) -> AddEntryConfig:
    """Synchronously get the reconciled add-entry configuration."""
    return asyncio.run(
        reconcile.reconcile_add_entry_configuration(
            cli_debug=debug,
            cli_changelog_path=changelog_path,
            cli_title_token=title_token,
            cli_dry_run=dry_run,
        )
    )


def get_inspect_config(
    debug: bool | None = None,
    changelog_path: Path | None = None,
) -> InspectConfig:
    """Synchronously get the reconciled inspect configuration."""
    return asyncio.run(
        reconcile.reconcile_inspect_configuration(
            cli_debug=debug,
            cli_changelog_path=changelog_path,
        )
    )
