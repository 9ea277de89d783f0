"""Unit tests for the configuration driver module."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

from changelog_manager.configuration import driver
from changelog_manager.configuration.models import AddEntryConfig, InspectConfig


def test_get_add_entry_config_returns_reconciled_config() -> None:
    """Test that get_add_entry_config returns the config."""
    fake_config = AddEntryConfig(
        debug=True,
        changelog_path=Path("CHANGELOG.md"),
        title_token="Changelog",
        chunk_size=1024,
        issue_tracker_url="https://tracker",
        repository_url="https://repo",
        profile_url="https://profile",
        author="dev",
        dry_run=False,
    )
    mock = AsyncMock(return_value=fake_config)
    with patch("changelog_manager.configuration.reconcile.reconcile_add_entry_configuration", new=mock) as mock_reconcile:
        result = driver.get_add_entry_config(debug=True, changelog_path=Path("CHANGELOG.md"), title_token=None, dry_run=False)
        mock_reconcile.assert_awaited_once_with(
            cli_debug=True,
            cli_changelog_path=Path("CHANGELOG.md"),
            cli_title_token=None,
            cli_dry_run=False,
        )
        assert result == fake_config


def test_get_inspect_config_returns_reconciled_config() -> None:
    """Test that get_inspect_config returns the config."""
    fake_config = InspectConfig(debug=False, changelog_path=Path("docs/CHANGELOG.md"), unpublished_heading="Unpublished")
    mock = AsyncMock(return_value=fake_config)
    with patch("changelog_manager.configuration.reconcile.reconcile_inspect_configuration", new=mock) as mock_reconcile:
        result = driver.get_inspect_config(debug=False, changelog_path=Path("docs/CHANGELOG.md"))
        mock_reconcile.assert_awaited_once_with(cli_debug=False, cli_changelog_path=Path("docs/CHANGELOG.md"))
        assert result == fake_config
