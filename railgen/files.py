"""Write and delete generated test files.

Generated files live at {output_root}/{package}/{snake_case_id}_test.go.
Overwriting an existing file first copies it to
{file}.backup.{YYYYMMDD-HHMMSS}; the copy must succeed before the original
is truncated.
"""

from __future__ import annotations

import logging
import shutil
from datetime import datetime
from pathlib import Path

from .errors import AlreadyExists, FileSystemError, NotExist
from .naming import build_file_name, sanitize_package_name

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


def target_path(output_root: Path | str, tag: str, operation_id: str) -> Path:
    """Expected location of the test file for an operation."""
    return Path(output_root) / sanitize_package_name(tag) / build_file_name(operation_id)


def file_exists(path: Path) -> bool:
    """Whether path exists.

    A path that cannot be stat'ed at all (name too long, parent is a file)
    counts as absent.
    """
    try:
        path.stat()
    except OSError:
        return False
    return True


def _check_exists(path: Path) -> bool:
    try:
        path.stat()
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise FileSystemError(f"cannot access {path}: {exc}") from exc
    return True


def backup_path(path: Path, now: datetime | None = None) -> Path:
    stamp = (now or datetime.now()).strftime(BACKUP_TIMESTAMP_FORMAT)
    return path.with_name(f"{path.name}.backup.{stamp}")


def write_test_file(
    path: Path,
    content: str,
    overwrite: bool = False,
    now: datetime | None = None,
) -> Path | None:
    """Write content to path, backing up any existing file.

    Returns the backup path when an existing file was replaced, else None.
    Raises AlreadyExists if the file exists and overwrite is False.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileSystemError(f"cannot create output directory: {exc}") from exc

    backup: Path | None = None
    if _check_exists(path):
        if not overwrite:
            raise AlreadyExists(path)
        backup = backup_path(path, now)
        try:
            shutil.copyfile(path, backup)
        except OSError as exc:
            raise FileSystemError(f"cannot create backup: {exc}") from exc
        logger.debug("Backed up %s to %s", path, backup)

    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as exc:
        raise FileSystemError(f"cannot write test file: {exc}") from exc

    return backup


def delete_test_file(path: Path) -> bool:
    """Delete a generated file and, if now empty, its package directory.

    Returns True when the directory was removed as well. A directory that
    still holds other files is left alone.
    """
    if not _check_exists(path):
        raise NotExist(path)
    try:
        path.unlink()
    except OSError as exc:
        raise FileSystemError(f"cannot delete test file: {exc}") from exc

    try:
        path.parent.rmdir()
    except OSError as exc:
        logger.debug("Kept directory %s: %s", path.parent, exc)
        return False
    return True
