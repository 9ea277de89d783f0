"""Data models for changelog entry insertion."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..utils.constants import (
    CONTINUATION_MARKER,
    DEFAULT_AUTHOR,
    DEFAULT_ISSUE_TRACKER_URL,
    DEFAULT_PROFILE_URL,
    DEFAULT_REPOSITORY_URL,
    HEADER_MARKER_WITH_SPACE,
    MAX_MESSAGE_LENGTH,
)


class IssueCategory(str, Enum):
    """Category of a changelog entry."""

    # Bug fixes and inconsistencies with the documentation.
    BUG_FIX = "bug-fix"
    # New features and non-breaking changes in the API.
    NEW_FEATURE = "new-feature"
    # Changes in the API that may require users to change their code.
    BREAKING_CHANGE = "breaking-change"
    # Upgrading vendored libs.
    LIBRARY_UPDATE = "library-update"
    # Anything that doesn't apply to other types.
    OTHER = "other"

    @property
    def label(self) -> str:
        """Label shown to the operator when choosing a category."""
        return _CATEGORY_LABELS[self]

    @property
    def section_title(self) -> str:
        """Title of the changelog section that collects entries of this category."""
        return _CATEGORY_SECTION_TITLES[self]


_CATEGORY_LABELS = {
    IssueCategory.BUG_FIX: "Bug-Fix 🐞",
    IssueCategory.NEW_FEATURE: "New-Feature 🔬",
    IssueCategory.BREAKING_CHANGE: "Breaking-Change ☢️",
    IssueCategory.LIBRARY_UPDATE: "Library-Update 📚",
    IssueCategory.OTHER: "Other 💡",
}

_CATEGORY_SECTION_TITLES = {
    IssueCategory.LIBRARY_UPDATE: "📚 3rd party library updates",
    IssueCategory.BREAKING_CHANGE: "☢️ Breaking changes",
    IssueCategory.NEW_FEATURE: "🔬 New features",
    IssueCategory.BUG_FIX: "🐞 Bug fixes",
    IssueCategory.OTHER: "💡 Others",
}


class ChangelogEntry(BaseModel):
    """A single change collected from the operator."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(max_length=MAX_MESSAGE_LENGTH)
    ticket_id: str
    pull_request_id: str
    category: IssueCategory


@dataclass(frozen=True)
class EntryLinks:
    """Link targets and author used when rendering an entry."""

    issue_tracker_url: str = DEFAULT_ISSUE_TRACKER_URL
    repository_url: str = DEFAULT_REPOSITORY_URL
    profile_url: str = DEFAULT_PROFILE_URL
    author: str = DEFAULT_AUTHOR


@dataclass(frozen=True)
class SectionBlock:
    """Contiguous span of a changelog between two header delimiters."""

    index: int
    raw: str

    @property
    def is_first(self) -> bool:
        """Whether this block opens the document."""
        return self.index == 0

    @property
    def looks_like_continuation(self) -> bool:
        """Whether the block starts with whitespace, i.e. it followed a `## ` header marker."""
        return self.raw.startswith(CONTINUATION_MARKER)

    @property
    def looks_like_header(self) -> bool:
        """Whether the block starts with a single header marker followed by a space."""
        return self.raw.startswith(HEADER_MARKER_WITH_SPACE)

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring test against a category keyword."""
        return keyword.lower() in self.raw.lower()


class InsertionState(str, Enum):
    """Progress of entry insertion within a single document transformation."""

    AWAITING_INSERTION = "awaiting_insertion"
    INSERTED = "inserted"


@dataclass(frozen=True)
class TransformOutcome:
    """Summary of what a document transformation did."""

    keyword: str
    inserted: bool
    block_index: int | None
    block_count: int


@dataclass(frozen=True)
class TransformResult:
    """Transformed document text together with its outcome."""

    content: str
    outcome: TransformOutcome


class AddEntryStatus(str, Enum):
    """Status of the add-entry workflow."""

    SUCCESS = "success"
    DRY_RUN = "dry_run"
    NO_MATCHING_SECTION = "no_matching_section"


class AddEntryResult(BaseModel):
    """Result of the add-entry workflow."""

    status: AddEntryStatus
    changelog_path: str
    keyword: str
    rendered_entry: str
    block_index: int | None = None
    content: str | None = None
