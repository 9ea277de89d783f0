"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_CHANGELOG_PATH,
    DEFAULT_TITLE_TOKEN,
    HEADER_DELIMITER,
    MAX_MESSAGE_LENGTH,
    UNPUBLISHED_HEADING,
)

__all__ = [
    "HEADER_DELIMITER",
    "DEFAULT_TITLE_TOKEN",
    "UNPUBLISHED_HEADING",
    "MAX_MESSAGE_LENGTH",
    "DEFAULT_CHANGELOG_PATH",
]
