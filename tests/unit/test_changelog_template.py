"""Unit tests for creating changelogs from the template."""

from pathlib import Path

import pytest

from changelog_manager.changelog.exceptions import ChangelogTemplateError
from changelog_manager.changelog.models import ChangelogEntry, IssueCategory
from changelog_manager.changelog.template import ChangelogTemplateModel, create_changelog, render_changelog
from changelog_manager.changelog.workflow import run_add_entry_workflow

EXPECTED_CHANGELOG = (
    "# Changelog\n"
    "\n"
    "## Unpublished\n"
    "\n"
    "### 📚 3rd party library updates\n"
    "\n"
    "### ☢️ Breaking changes\n"
    "\n"
    "### 🔬 New features\n"
    "\n"
    "### 🐞 Bug fixes\n"
    "\n"
    "### 💡 Others\n"
    "\n"
)


def test_render_default_changelog() -> None:
    """The default changelog has one section per category."""
    assert render_changelog() == EXPECTED_CHANGELOG


def test_render_custom_model() -> None:
    """Title, unpublished heading and sections come from the model."""
    model = ChangelogTemplateModel(title="Release notes", unpublished_heading="Next", sections=["Fixes"])
    assert render_changelog(model) == "# Release notes\n\n## Next\n\n### Fixes\n\n"


def test_create_changelog(tmp_path: Path) -> None:
    """A new changelog file is written."""
    path = create_changelog(tmp_path / "CHANGELOG.md")
    assert path.read_text(encoding="utf-8") == EXPECTED_CHANGELOG


def test_create_changelog_refuses_to_overwrite(changelog_file: Path, sample_changelog: str) -> None:
    """An existing changelog is kept unless forced."""
    with pytest.raises(ChangelogTemplateError):
        create_changelog(changelog_file)
    assert changelog_file.read_text(encoding="utf-8") == sample_changelog


def test_create_changelog_force_overwrites(changelog_file: Path) -> None:
    """Forcing replaces an existing changelog."""
    create_changelog(changelog_file, force=True)
    assert changelog_file.read_text(encoding="utf-8") == EXPECTED_CHANGELOG


@pytest.mark.parametrize("category", list(IssueCategory))
def test_every_category_lands_in_its_section(tmp_path: Path, category: IssueCategory) -> None:
    """A freshly created changelog has a section for every category."""
    path = create_changelog(tmp_path / "CHANGELOG.md")
    entry = ChangelogEntry(message="Change", ticket_id="ABC-1", pull_request_id="1", category=category)

    result = run_add_entry_workflow(path, entry)

    heading = f"### {category.section_title}\n\n"
    assert path.read_text(encoding="utf-8") == EXPECTED_CHANGELOG.replace(heading, heading + result.rendered_entry, 1)
