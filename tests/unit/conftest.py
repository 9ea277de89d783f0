"""Fixtures for unit tests."""

from pathlib import Path
from typing import Generator

import pytest
import structlog

from changelog_manager.changelog.formatter import format_entry
from changelog_manager.changelog.models import ChangelogEntry, IssueCategory

SAMPLE_CHANGELOG = (
    "# Changelog\n"
    "\n"
    "## Unpublished\n"
    "\n"
    "### 🐞 Bug fixes\n"
    "\n"
    "- Old fix.\n"
    "\n"
    "### 🔬 New features\n"
    "\n"
    "## 1.0.0\n"
    "\n"
    "### 🐞 Bug fixes\n"
    "\n"
    "- Released fix.\n"
)


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_changelog() -> str:
    """A changelog with an unpublished section and one released version."""
    return SAMPLE_CHANGELOG


@pytest.fixture
def bug_fix_entry() -> ChangelogEntry:
    """A bug fix entry."""
    return ChangelogEntry(
        message="Fix null pointer",
        ticket_id="ABC-42",
        pull_request_id="99",
        category=IssueCategory.BUG_FIX,
    )


@pytest.fixture
def rendered_bug_fix_entry(bug_fix_entry: ChangelogEntry) -> str:
    """The bug fix entry rendered with the default links."""
    return format_entry(bug_fix_entry)


@pytest.fixture
def changelog_file(tmp_path: Path, sample_changelog: str) -> Path:
    """The sample changelog written to a temporary CHANGELOG.md."""
    path = tmp_path / "CHANGELOG.md"
    path.write_text(sample_changelog, encoding="utf-8")
    return path
