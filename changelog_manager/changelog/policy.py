"""Decides which category section receives a new changelog entry."""

from typing import Iterable

import structlog

from ..utils.constants import CATEGORY_SEPARATOR
from .models import InsertionState, IssueCategory, SectionBlock

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def category_keyword(category: IssueCategory | str) -> str:
    """Derive the keyword used to match a category section.

    The keyword is the part of the category value before its first dash,
    lower-cased: ``bug-fix`` becomes ``bug`` and ``other`` stays ``other``.
    """
    value = category.value if isinstance(category, IssueCategory) else category
    return value.split(CATEGORY_SEPARATOR, 1)[0].lower()


class InsertionPolicy:
    """Appends an entry to the first section matching a keyword, at most once.

    An instance holds the insertion state of a single document
    transformation. Blocks must be applied in document order.
    """

    def __init__(self, keyword: str, rendered_entry: str) -> None:
        """Initialize with the category keyword and the rendered entry."""
        self.keyword = keyword.lower()
        self.rendered_entry = rendered_entry
        self.state = InsertionState.AWAITING_INSERTION
        self.inserted_index: int | None = None

    @property
    def inserted(self) -> bool:
        """Whether the entry has been appended to a block."""
        return self.state is InsertionState.INSERTED

    def apply(self, block: SectionBlock) -> str:
        """Return the block text, with the entry appended if this is the first match."""
        if self.state is InsertionState.INSERTED or not block.matches(self.keyword):
            return block.raw
        self.state = InsertionState.INSERTED
        self.inserted_index = block.index
        logger.debug("Appending entry to section", block_index=block.index, keyword=self.keyword)
        return block.raw + self.rendered_entry


def insert_entry(blocks: Iterable[SectionBlock], keyword: str, rendered_entry: str) -> tuple[list[str], int | None]:
    """Append an entry to the first matching block of a sequence.

    Returns:
        Tuple of (block texts in order, index of the block that received the entry or None).
    """
    policy = InsertionPolicy(keyword, rendered_entry)
    texts = [policy.apply(block) for block in blocks]
    return texts, policy.inserted_index
