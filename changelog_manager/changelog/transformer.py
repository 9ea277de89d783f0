"""Inserts a rendered entry into a changelog document.

The document is split into category sections, the entry is appended to the
first section matching the category keyword, consumed header markers are
restored, and the sections are joined back together. ``transform_blocks`` is
the pure core; ``DocumentTransformer`` drives it incrementally so large
documents can be streamed chunk by chunk with output identical to a single
in-memory pass.
"""

from typing import Iterable, Iterator

import structlog

from ..utils.constants import DEFAULT_TITLE_TOKEN
from .models import IssueCategory, SectionBlock, TransformOutcome, TransformResult
from .normalizer import normalize_block
from .policy import InsertionPolicy, category_keyword
from .splitter import SectionSplitter

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def transform_blocks(
    blocks: Iterable[SectionBlock],
    policy: InsertionPolicy,
    title_token: str = DEFAULT_TITLE_TOKEN,
) -> Iterator[str]:
    """Yield the output text of each block in document order."""
    for block in blocks:
        text = policy.apply(block)
        yield normalize_block(block, text, title_token)


class DocumentTransformer:
    """Transforms a single changelog document, whole or chunk by chunk."""

    def __init__(self, keyword: str, rendered_entry: str, title_token: str = DEFAULT_TITLE_TOKEN) -> None:
        """Initialize with the category keyword, the rendered entry and the title token."""
        self.title_token = title_token
        self._splitter = SectionSplitter()
        self._policy = InsertionPolicy(keyword, rendered_entry)
        self._finished = False

    @property
    def outcome(self) -> TransformOutcome:
        """Outcome of the transformation so far."""
        return TransformOutcome(
            keyword=self._policy.keyword,
            inserted=self._policy.inserted,
            block_index=self._policy.inserted_index,
            block_count=self._splitter.block_count,
        )

    def feed(self, chunk: str) -> str:
        """Transform a chunk of the document, returning the output it completed."""
        if self._finished:
            raise RuntimeError("Cannot feed a transformer that has already finished")
        return "".join(transform_blocks(self._splitter.feed(chunk), self._policy, self.title_token))

    def finish(self) -> str:
        """Transform whatever is still buffered and close the transformation."""
        if self._finished:
            return ""
        self._finished = True
        tail = "".join(transform_blocks(self._splitter.flush(), self._policy, self.title_token))
        outcome = self.outcome
        if outcome.inserted:
            logger.info("Inserted changelog entry", keyword=outcome.keyword, block_index=outcome.block_index)
        else:
            logger.warning(
                "No changelog section matched category keyword, entry was not inserted",
                keyword=outcome.keyword,
                block_count=outcome.block_count,
            )
        return tail

    def transform_chunks(self, chunks: Iterable[str]) -> Iterator[str]:
        """Transform a stream of chunks, yielding output as it becomes available."""
        for chunk in chunks:
            output = self.feed(chunk)
            if output:
                yield output
        tail = self.finish()
        if tail:
            yield tail

    def transform(self, document: str) -> TransformResult:
        """Transform a whole document in one pass."""
        content = "".join(self.transform_chunks([document]))
        return TransformResult(content=content, outcome=self.outcome)


def transform_document(
    document: str,
    category: IssueCategory | str,
    rendered_entry: str,
    title_token: str = DEFAULT_TITLE_TOKEN,
) -> TransformResult:
    """Insert a rendered entry into the section of a document matching a category."""
    transformer = DocumentTransformer(category_keyword(category), rendered_entry, title_token)
    return transformer.transform(document)
