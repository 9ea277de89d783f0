"""Repairs header markers consumed by splitting a changelog into sections."""

import structlog

from ..utils.constants import DEFAULT_TITLE_TOKEN, HEADER_DELIMITER
from .models import SectionBlock

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def restore_header_delimiter(block: SectionBlock, text: str) -> str:
    """Prepend the header delimiter to a block that lost it to the split.

    A block that starts with a space followed a ``## `` header, and a block
    that starts with ``# `` followed the first two hashes of a deeper header.
    """
    if block.looks_like_continuation or block.looks_like_header:
        return HEADER_DELIMITER + text
    return text


def is_title_block(block: SectionBlock, title_token: str = DEFAULT_TITLE_TOKEN) -> bool:
    """Whether the block is the first one and names the document title, ignoring case."""
    return block.is_first and title_token.lower() in block.raw.lower()


def normalize_block(block: SectionBlock, text: str, title_token: str = DEFAULT_TITLE_TOKEN) -> str:
    """Restore the delimiter a block lost to the split.

    The first block precedes every delimiter, so it never lost one and is
    returned as it is, whatever its title says.
    """
    if block.is_first:
        if not is_title_block(block, title_token):
            logger.debug("First changelog section does not mention the title token", title_token=title_token)
        return text
    return restore_header_delimiter(block, text)
