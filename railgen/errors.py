"""Exceptions raised by the railgen pipeline.

Every failure the CLI reports derives from RailgenError. Usage problems
(missing or invalid options) are left to click.UsageError.
"""

from __future__ import annotations

from pathlib import Path


class RailgenError(Exception):
    """Base class for all railgen failures."""


class LoadError(RailgenError):
    """The OpenAPI document is missing, unreadable or not a valid document."""


class OperationNotFound(RailgenError):
    """No operation in the document carries the requested operationId."""

    def __init__(self, operation_id: str) -> None:
        self.operation_id = operation_id
        super().__init__(f"operation with ID '{operation_id}' not found")


class AlreadyExists(RailgenError):
    """Generation target exists and overwrite was not requested."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"test file already exists: {path} (use --overwrite to overwrite the existing file)"
        )


class NotExist(RailgenError):
    """Deletion target does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"test file does not exist: {path}")


class FileSystemError(RailgenError):
    """An I/O failure while creating, copying or removing files."""


class RenderError(RailgenError):
    """The test template is missing or malformed."""
