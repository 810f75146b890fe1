# src/cache/file_ops.py — v2
"""Filesystem primitives for the single cache file.

OS errors are mapped onto the feed store error taxonomy here so that the
store only ever sees FeedStoreError subclasses. A missing file is never an
error: read_bytes returns None and remove_file reports that nothing was
removed.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from feedstore.cache.errors import DeleteFailedError, ReadFailedError, WriteFailedError

logger = logging.getLogger(__name__)


def read_bytes(path: Path) -> bytes | None:
    """Read the whole file, or return None if it does not exist.

    Raises:
        ReadFailedError: If the path exists but cannot be read.
    """
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise ReadFailedError(path, exc.strerror or str(exc)) from exc


def atomic_write(path: Path, data: bytes) -> None:
    """Replace the file at path with data in one step.

    The bytes go to a temporary file in the same directory, are flushed to
    disk, then renamed over the target. Readers see either the old file or
    the new one. The parent directory is never created.

    Raises:
        WriteFailedError: If any step fails. The target is left untouched.
    """
    tmp_name: str | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
        _fsync_directory(path.parent)
    except OSError as exc:
        raise WriteFailedError(path, exc.strerror or str(exc)) from exc
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)


def _fsync_directory(dir_path: Path) -> None:
    """Persist the rename itself. Best effort: the new file is already in place."""
    try:
        fd = os.open(dir_path, os.O_RDONLY | getattr(os, "O_DIRECTORY", 0))
        try:
            os.fsync(fd)
        finally:
            os.close(fd)
    except OSError as exc:
        logger.debug("Directory fsync skipped for %s: %s", dir_path, exc)


def remove_file(path: Path) -> bool:
    """Remove the file at path. Return False if there was nothing to remove.

    Raises:
        DeleteFailedError: If the path exists but cannot be removed.
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise DeleteFailedError(path, exc.strerror or str(exc)) from exc
    return True
