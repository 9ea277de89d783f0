"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass
from pathlib import Path

from changelog_manager.changelog.models import EntryLinks


@dataclass
class BaseConfig:
    """Configuration class for the Changelog Manager CLI."""

    debug: bool
    changelog_path: Path


@dataclass
class AddEntryConfig(BaseConfig):
    """Configuration class for the add-entry command."""

    title_token: str
    chunk_size: int
    issue_tracker_url: str
    repository_url: str
    profile_url: str
    author: str
    dry_run: bool

    def entry_links(self) -> EntryLinks:
        """Link targets and author for rendering entries."""
        return EntryLinks(
            issue_tracker_url=self.issue_tracker_url,
            repository_url=self.repository_url,
            profile_url=self.profile_url,
            author=self.author,
        )


@dataclass
class InspectConfig(BaseConfig):
    """Configuration class for the inspect command."""

    unpublished_heading: str
