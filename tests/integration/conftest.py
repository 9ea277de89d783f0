"""Pytest configuration for integration tests."""

from pathlib import Path

import pytest

CHANGELOG_ENVIRONMENT_VARIABLES = [
    "DEBUG",
    "CHANGELOG_PATH",
    "CHANGELOG_TITLE_TOKEN",
    "CHANGELOG_UNPUBLISHED_HEADING",
    "CHANGELOG_CHUNK_SIZE",
    "ISSUE_TRACKER_URL",
    "REPOSITORY_URL",
    "PROFILE_URL",
    "CHANGELOG_AUTHOR",
]


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run every integration test from an empty directory with no changelog settings in the environment.

    The CLI reads .env from the working directory, so the temporary directory
    keeps a developer's own .env out of the tests.
    """
    for name in CHANGELOG_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def changelog_file(tmp_path: Path) -> Path:
    """A changelog with an Unpublished section, written to CHANGELOG.md in the working directory."""
    path = tmp_path / "CHANGELOG.md"
    path.write_text(
        "# Changelog\n\n## Unpublished\n\n### 🐞 Bug fixes\n\n- Old fix.\n\n### 🔬 New features\n\n## 1.0.0\n\n- Released.\n",
        encoding="utf-8",
    )
    return path
