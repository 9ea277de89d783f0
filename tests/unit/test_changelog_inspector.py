"""Unit tests for markdown inspection of changelogs."""

from changelog_manager.changelog.inspector import ChangelogHeading, ChangelogInspector


def test_headings_outline(sample_changelog: str) -> None:
    """Every heading is returned with its level, in document order."""
    headings = ChangelogInspector().headings(sample_changelog)

    assert headings == [
        ChangelogHeading(1, "Changelog"),
        ChangelogHeading(2, "Unpublished"),
        ChangelogHeading(3, "🐞 Bug fixes"),
        ChangelogHeading(3, "🔬 New features"),
        ChangelogHeading(2, "1.0.0"),
        ChangelogHeading(3, "🐞 Bug fixes"),
    ]


def test_headings_with_inline_markup() -> None:
    """Inline markup inside a heading is flattened to its text."""
    headings = ChangelogInspector().headings("## Release *1.2.0*\n")
    assert headings == [ChangelogHeading(2, "Release 1.2.0")]


def test_unpublished_section_found(sample_changelog: str) -> None:
    """The unpublished heading is located."""
    inspector = ChangelogInspector()
    assert inspector.has_unpublished_section(sample_changelog)
    assert inspector.find_unpublished_heading(sample_changelog) == ChangelogHeading(2, "Unpublished")


def test_unpublished_section_missing() -> None:
    """Documents without the heading are reported as such."""
    inspector = ChangelogInspector()
    assert inspector.find_unpublished_heading("# Changelog\n\n## 1.0.0\n") is None
    assert not inspector.has_unpublished_section("# Changelog\n\n## 1.0.0\n")
    assert inspector.unpublished_subsections("# Changelog\n\n## 1.0.0\n") == []


def test_unpublished_subsections_stop_at_next_release(sample_changelog: str) -> None:
    """Subsections of released versions are not included."""
    subsections = ChangelogInspector().unpublished_subsections(sample_changelog)
    assert subsections == [ChangelogHeading(3, "🐞 Bug fixes"), ChangelogHeading(3, "🔬 New features")]


def test_custom_unpublished_heading_is_case_insensitive() -> None:
    """The heading text to look for is configurable."""
    inspector = ChangelogInspector(unpublished_heading="next release")
    document = "# Changelog\n\n## Next Release\n\n### Others\n"
    assert inspector.find_unpublished_heading(document) == ChangelogHeading(2, "Next Release")
    assert inspector.unpublished_subsections(document) == [ChangelogHeading(3, "Others")]
