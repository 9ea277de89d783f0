"""Reading and replacing changelog files.

Updated content is first written to a staged file next to the changelog and
only swapped into place with an atomic rename once it is complete, so a failed
run never leaves the original partially overwritten.
"""

import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterable, Iterator

import structlog

from ..utils.constants import DEFAULT_CHANGELOG_ENCODING, DEFAULT_CHUNK_SIZE, STAGED_FILE_MARKER
from .exceptions import ChangelogReadError, ChangelogWriteError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def read_changelog(path: Path, encoding: str = DEFAULT_CHANGELOG_ENCODING) -> str:
    """Read a whole changelog file."""
    with open_changelog(path, encoding=encoding) as chunks:
        return "".join(chunks)


@contextmanager
def open_changelog(
    path: Path,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    encoding: str = DEFAULT_CHANGELOG_ENCODING,
) -> Iterator[Iterator[str]]:
    """Open a changelog and provide an iterator over its text in chunks.

    The file is opened on entry so a missing or unreadable changelog is
    reported before anything is staged, and it is closed on exit even if the
    chunks were never consumed.

    Raises:
        ChangelogReadError: If the file cannot be opened or decoded.
    """
    if chunk_size <= 0:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")
    try:
        handle = open(path, encoding=encoding, newline="")
    except OSError as exc:
        logger.error("Failed to open changelog", path=str(path), error=str(exc))
        raise ChangelogReadError(path, exc.strerror or str(exc)) from exc
    with handle:
        yield _read_chunks(handle, path, chunk_size)


def _read_chunks(handle: IO[str], path: Path, chunk_size: int) -> Iterator[str]:
    while True:
        try:
            chunk = handle.read(chunk_size)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read changelog", path=str(path), error=str(exc))
            raise ChangelogReadError(path, str(exc)) from exc
        if not chunk:
            return
        yield chunk


def stage_changelog(path: Path, chunks: Iterable[str], encoding: str = DEFAULT_CHANGELOG_ENCODING) -> Path:
    """Write chunks to a staged file next to the changelog.

    The staged file is removed if reading or writing fails.

    Returns:
        Path of the staged file.

    Raises:
        ChangelogReadError: If the chunk source fails while being consumed.
        ChangelogWriteError: If the staged file cannot be created or written.
    """
    try:
        fd, staged_name = tempfile.mkstemp(
            prefix=f"{path.stem}{STAGED_FILE_MARKER}",
            suffix=path.suffix,
            dir=path.parent,
        )
    except OSError as exc:
        logger.error("Failed to create staged changelog", path=str(path), error=str(exc))
        raise ChangelogWriteError(path, str(exc)) from exc

    staged = Path(staged_name)
    try:
        with open(fd, "w", encoding=encoding, newline="") as staged_file:
            for chunk in chunks:
                staged_file.write(chunk)
    except ChangelogReadError:
        discard_staged_changelog(staged)
        raise
    except OSError as exc:
        logger.error("Failed to write staged changelog", staged=str(staged), error=str(exc))
        discard_staged_changelog(staged)
        raise ChangelogWriteError(staged, str(exc)) from exc

    logger.debug("Staged updated changelog", path=str(path), staged=str(staged))
    return staged


def commit_staged_changelog(staged: Path, path: Path) -> None:
    """Atomically swap a staged file into place of the changelog.

    Raises:
        ChangelogWriteError: If the rename fails. The original changelog is left intact.
    """
    try:
        shutil.copymode(path, staged)
    except OSError as exc:
        logger.warning("Failed to copy changelog permissions to staged file", path=str(path), error=str(exc))
    try:
        os.replace(staged, path)
    except OSError as exc:
        logger.error("Failed to replace changelog with staged file", path=str(path), staged=str(staged), error=str(exc))
        discard_staged_changelog(staged)
        raise ChangelogWriteError(path, str(exc)) from exc
    logger.info("Replaced changelog", path=str(path))


def discard_staged_changelog(staged: Path) -> None:
    """Remove a staged file that will not be swapped into place."""
    try:
        staged.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Failed to remove staged changelog", staged=str(staged), error=str(exc))
