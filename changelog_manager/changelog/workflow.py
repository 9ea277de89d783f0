"""Orchestrates adding an entry to a changelog file."""

import time
from pathlib import Path

import structlog

from ..utils.constants import DEFAULT_CHUNK_SIZE, DEFAULT_TITLE_TOKEN
from .formatter import format_entry
from .models import AddEntryResult, AddEntryStatus, ChangelogEntry, EntryLinks
from .policy import category_keyword
from .storage import commit_staged_changelog, discard_staged_changelog, open_changelog, stage_changelog
from .transformer import DocumentTransformer

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def run_add_entry_workflow(
    changelog_path: Path,
    entry: ChangelogEntry,
    links: EntryLinks | None = None,
    title_token: str = DEFAULT_TITLE_TOKEN,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    dry_run: bool = False,
) -> AddEntryResult:
    """Run the add-entry workflow: render the entry, stream it into the changelog and swap the result into place.

    The changelog is streamed through the transformer into a staged file. The
    staged file replaces the changelog only if the entry was inserted; when no
    section matches the category the staged file is discarded and the
    changelog is left untouched. In dry-run mode nothing is written and the
    transformed content is returned instead.

    Raises:
        ChangelogReadError: If the changelog cannot be read.
        ChangelogWriteError: If the updated changelog cannot be written or swapped into place.
    """
    rendered_entry = format_entry(entry, links)
    keyword = category_keyword(entry.category)
    transformer = DocumentTransformer(keyword, rendered_entry, title_token)

    start_time = time.time()
    logger.info("Adding changelog entry", path=str(changelog_path), category=entry.category.value, keyword=keyword)

    if dry_run:
        with open_changelog(changelog_path, chunk_size=chunk_size) as chunks:
            content = "".join(transformer.transform_chunks(chunks))
        outcome = transformer.outcome
        logger.info("Dry run mode - not writing changelog", inserted=outcome.inserted)
        return AddEntryResult(
            status=AddEntryStatus.DRY_RUN if outcome.inserted else AddEntryStatus.NO_MATCHING_SECTION,
            changelog_path=str(changelog_path),
            keyword=keyword,
            rendered_entry=rendered_entry,
            block_index=outcome.block_index,
            content=content,
        )

    with open_changelog(changelog_path, chunk_size=chunk_size) as chunks:
        staged = stage_changelog(changelog_path, transformer.transform_chunks(chunks))
    outcome = transformer.outcome
    if not outcome.inserted:
        discard_staged_changelog(staged)
        return AddEntryResult(
            status=AddEntryStatus.NO_MATCHING_SECTION,
            changelog_path=str(changelog_path),
            keyword=keyword,
            rendered_entry=rendered_entry,
        )

    commit_staged_changelog(staged, changelog_path)
    logger.info(
        "Added changelog entry",
        path=str(changelog_path),
        block_index=outcome.block_index,
        block_count=outcome.block_count,
        duration=round(time.time() - start_time, 2),
    )
    return AddEntryResult(
        status=AddEntryStatus.SUCCESS,
        changelog_path=str(changelog_path),
        keyword=keyword,
        rendered_entry=rendered_entry,
        block_index=outcome.block_index,
    )
