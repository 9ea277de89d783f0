"""Custom exceptions for the changelog module."""

from pathlib import Path


class ChangelogError(Exception):
    """Base class for errors raised while updating a changelog."""

    pass


class ChangelogReadError(ChangelogError):
    """Raised when the source changelog cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        """Initializes the exception with the unreadable path and the cause."""
        super().__init__(f"Unable to read changelog {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class ChangelogWriteError(ChangelogError):
    """Raised when the updated changelog cannot be staged or swapped into place."""

    def __init__(self, path: Path | str, reason: str) -> None:
        """Initializes the exception with the destination path and the cause."""
        super().__init__(f"Unable to write changelog {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class ChangelogTemplateError(ChangelogError):
    """Raised when a new changelog cannot be rendered or would overwrite an existing one."""

    pass
