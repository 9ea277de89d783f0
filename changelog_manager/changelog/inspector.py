"""Read-only markdown inspection of changelog documents.

This is a diagnostic path: it tokenizes the document with mistune to report
its heading outline and whether an "Unpublished" section exists. Entry
insertion never goes through it.
"""

from dataclasses import dataclass
from typing import Any

import mistune
import structlog

from ..utils.constants import UNPUBLISHED_HEADING

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ChangelogHeading:
    """A heading found in a changelog document."""

    level: int
    text: str


def _collect_text(tokens: list[dict[str, Any]]) -> str:
    """Concatenate the raw text of inline tokens, descending into children."""
    parts: list[str] = []
    for token in tokens:
        if "children" in token:
            parts.append(_collect_text(token["children"]))
        elif "raw" in token:
            parts.append(token["raw"])
    return "".join(parts)


class ChangelogInspector:
    """Tokenizes changelog documents and looks up their headings."""

    def __init__(self, unpublished_heading: str = UNPUBLISHED_HEADING) -> None:
        """Initialize with the heading text that marks unpublished changes."""
        self.unpublished_heading = unpublished_heading
        self._markdown = mistune.create_markdown(renderer=None)

    def tokenize(self, content: str) -> list[dict[str, Any]]:
        """Tokenize a document into block-level tokens."""
        tokens: list[dict[str, Any]] = self._markdown(content)  # type: ignore[assignment]
        logger.debug("Tokenized changelog", token_count=len(tokens))
        return tokens

    def headings(self, content: str) -> list[ChangelogHeading]:
        """Return every heading of a document in order."""
        return [
            ChangelogHeading(level=token["attrs"]["level"], text=_collect_text(token.get("children", [])).strip())
            for token in self.tokenize(content)
            if token["type"] == "heading"
        ]

    def find_unpublished_heading(self, content: str) -> ChangelogHeading | None:
        """Return the first heading naming the unpublished section, if any."""
        for heading in self.headings(content):
            if self.unpublished_heading.lower() in heading.text.lower():
                return heading
        return None

    def has_unpublished_section(self, content: str) -> bool:
        """Whether the document contains an unpublished section heading."""
        return self.find_unpublished_heading(content) is not None

    def unpublished_subsections(self, content: str) -> list[ChangelogHeading]:
        """Return the headings nested under the unpublished section.

        Collection stops at the next heading at the same or a shallower level
        than the unpublished heading itself.
        """
        subsections: list[ChangelogHeading] = []
        unpublished: ChangelogHeading | None = None
        for heading in self.headings(content):
            if unpublished is None:
                if self.unpublished_heading.lower() in heading.text.lower():
                    unpublished = heading
                continue
            if heading.level <= unpublished.level:
                break
            subsections.append(heading)
        return subsections
