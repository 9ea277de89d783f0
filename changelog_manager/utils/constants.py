"""Shared constants used across the application."""

# Changelog Document Constants
# ----------------------------

HEADER_DELIMITER = "##"
"""Two-character marker of category headers. Documents are split on every occurrence."""

HEADER_MARKER_WITH_SPACE = "# "
"""Leading text of a block whose header had deeper hashes than the delimiter consumed."""

CONTINUATION_MARKER = " "
"""Leading text of a block whose `## ` header lost its delimiter to the split."""

DEFAULT_TITLE_TOKEN = "Changelog"
"""Word identifying the top-level title block of the document."""

UNPUBLISHED_HEADING = "Unpublished"
"""Heading under which not-yet-released entries accumulate."""

CATEGORY_SEPARATOR = "-"
"""Separator inside category values; the keyword is the part before the first one."""

# Entry Constants
# ---------------

MAX_MESSAGE_LENGTH = 50
"""Maximum length of a changelog message."""

MESSAGE_TOO_LONG_ERROR = "Sorry changelog message should be shorter"
"""Error shown to the operator when a message exceeds MAX_MESSAGE_LENGTH."""

DEFAULT_TICKET_PLACEHOLDER = "ABC-1234"
"""Placeholder ticket offered when prompting."""

DEFAULT_PULL_REQUEST_PLACEHOLDER = "github.com/project/pull/"
"""Placeholder pull request offered when prompting."""

DEFAULT_ISSUE_TRACKER_URL = "https://url.to.jira.or.something"
"""Base URL that ticket identifiers are appended to."""

DEFAULT_REPOSITORY_URL = "https://github.com/repository"
"""Repository URL; pull requests live under `<url>/pull/<id>`."""

DEFAULT_PROFILE_URL = "https://github.com"
"""Base URL that author handles are appended to."""

DEFAULT_AUTHOR = "aleSlzr"
"""Author handle credited in rendered entries."""

ENTRY_TERMINATOR = "\n\n"
"""Rendered entries end with a blank line."""

# File Settings
# -------------

DEFAULT_CHANGELOG_PATH = "CHANGELOG.md"
"""Default path to the changelog document."""

DEFAULT_CHANGELOG_ENCODING = "utf-8"
"""Encoding used to read and write the changelog document."""

DEFAULT_CHUNK_SIZE = 64 * 1024
"""Number of characters read from the changelog per chunk."""

STAGED_FILE_MARKER = "_temp"
"""Inserted between the changelog stem and suffix for staged output files."""
