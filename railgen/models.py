"""Read-only views over a loaded OpenAPI document."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Operation:
    """A single (method, path) entry of the document."""

    operation_id: str
    method: str
    path: str
    tags: tuple[str, ...] = ()
    summary: str = ""
    description: str = ""
    # (code, description) pairs in document order
    responses: tuple[tuple[str, str], ...] = ()

    @property
    def tag(self) -> str:
        """Primary tag, or an empty string for untagged operations."""
        return self.tags[0] if self.tags else ""


@dataclass(frozen=True)
class ResponseEntry:
    code: str
    description: str
    method: str
    path: str


@dataclass(frozen=True)
class TestRenderContext:
    """Everything the test template needs for one operation."""

    __test__ = False  # not a pytest class

    package_name: str
    test_name: str
    method: str
    path: str
    summary: str = ""
    description: str = ""
    responses: list[ResponseEntry] = field(default_factory=list)
    # None when no comments file was given; "" entries are blank lines
    custom_comments: list[str] | None = None


@dataclass(frozen=True)
class OperationInventoryItem:
    operation_id: str
    method: str
    path: str
    tag: str
    summary: str
    description: str
    implemented: bool


@dataclass(frozen=True)
class SpecDocument:
    """A loaded document plus its operations in document order."""

    source: Path
    operations: tuple[Operation, ...]
