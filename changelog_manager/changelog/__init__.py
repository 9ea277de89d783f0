"""Changelog entry insertion module."""

from .exceptions import ChangelogError, ChangelogReadError, ChangelogTemplateError, ChangelogWriteError
from .formatter import format_entry
from .inspector import ChangelogHeading, ChangelogInspector
from .models import (
    AddEntryResult,
    AddEntryStatus,
    ChangelogEntry,
    EntryLinks,
    InsertionState,
    IssueCategory,
    SectionBlock,
    TransformOutcome,
    TransformResult,
)
from .normalizer import normalize_block
from .policy import InsertionPolicy, category_keyword, insert_entry
from .splitter import SectionSplitter, split_sections
from .transformer import DocumentTransformer, transform_blocks, transform_document
from .workflow import run_add_entry_workflow

__all__ = [
    "AddEntryResult",
    "AddEntryStatus",
    "ChangelogEntry",
    "ChangelogError",
    "ChangelogHeading",
    "ChangelogInspector",
    "ChangelogReadError",
    "ChangelogTemplateError",
    "ChangelogWriteError",
    "DocumentTransformer",
    "EntryLinks",
    "InsertionPolicy",
    "InsertionState",
    "IssueCategory",
    "SectionBlock",
    "SectionSplitter",
    "TransformOutcome",
    "TransformResult",
    "category_keyword",
    "format_entry",
    "insert_entry",
    "normalize_block",
    "run_add_entry_workflow",
    "split_sections",
    "transform_blocks",
    "transform_document",
]
