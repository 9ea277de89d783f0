"""Splitting of changelog text into category sections.

Category sections are found by splitting on every occurrence of the ``##``
header delimiter instead of parsing markdown. This also cuts inside body text
that happens to contain ``##``, which is an accepted limitation for changelog
documents. The delimiter is consumed by the split and restored later by the
header normalizer.
"""

import structlog

from ..utils.constants import HEADER_DELIMITER
from .models import SectionBlock

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def split_sections(text: str, delimiter: str = HEADER_DELIMITER) -> list[SectionBlock]:
    """Split a whole document into category sections."""
    return [SectionBlock(index=index, raw=raw) for index, raw in enumerate(text.split(delimiter))]


class SectionSplitter:
    """Splits a document into category sections as it arrives chunk by chunk.

    Text of the block still being read is kept as a list of parts, except for
    the last ``len(delimiter) - 1`` characters, which are carried over and
    scanned again with the next chunk so a delimiter straddling two chunks is
    still recognised. Each chunk is scanned once. Feeding any chunking of a
    document and then flushing yields the same blocks as ``split_sections`` on
    the whole document.
    """

    def __init__(self, delimiter: str = HEADER_DELIMITER) -> None:
        """Initialize with the delimiter to split on."""
        self.delimiter = delimiter
        self._parts: list[str] = []
        self._carry = ""
        self._next_index = 0
        self._flushed = False

    @property
    def block_count(self) -> int:
        """Number of blocks emitted so far."""
        return self._next_index

    def feed(self, chunk: str) -> list[SectionBlock]:
        """Add a chunk of text and return the blocks it completed."""
        if self._flushed:
            raise RuntimeError("Cannot feed a splitter that has already been flushed")
        *complete, tail = (self._carry + chunk).split(self.delimiter)
        blocks = []
        for piece in complete:
            self._parts.append(piece)
            blocks.append(self._emit("".join(self._parts)))
            self._parts = []
        # No delimiter can start before the last len(delimiter) - 1 characters of the tail.
        keep = len(self.delimiter) - 1
        if len(tail) > keep:
            cut = len(tail) - keep
            self._parts.append(tail[:cut])
            self._carry = tail[cut:]
        else:
            self._carry = tail
        return blocks

    def flush(self) -> list[SectionBlock]:
        """Emit the final block once the whole document has been fed."""
        if self._flushed:
            return []
        self._flushed = True
        self._parts.append(self._carry)
        block = self._emit("".join(self._parts))
        self._parts = []
        self._carry = ""
        logger.debug("Split changelog into sections", block_count=self._next_index)
        return [block]

    def _emit(self, raw: str) -> SectionBlock:
        block = SectionBlock(index=self._next_index, raw=raw)
        self._next_index += 1
        return block
