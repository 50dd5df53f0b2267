"""Build the Jinja2 template context for one operation.

Responses are sorted by status code as plain strings ("200" < "404" < "4XX")
and the catch-all "default" response is dropped: it has no status to test.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import FileSystemError
from .models import Operation, ResponseEntry, TestRenderContext
from .naming import build_test_name, sanitize_package_name

logger = logging.getLogger(__name__)

_DEFAULT_RESPONSE = "default"


def load_custom_comments(path: Path | None) -> list[str] | None:
    """Read a comments file as a list of lines.

    Lines are split on '\\n' only and a trailing empty line (from a final
    newline) is kept. Returns None when no file is given.
    """
    if path is None:
        return None
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileSystemError(f"cannot read comments file: {exc}") from exc
    lines = content.split("\n")
    logger.debug("Loaded %d comment lines from %s", len(lines), path)
    return lines


def build_response_entries(operation: Operation) -> list[ResponseEntry]:
    """Sorted, non-default responses of an operation."""
    descriptions = dict(operation.responses)
    codes = sorted(code for code in descriptions if code != _DEFAULT_RESPONSE)
    return [
        ResponseEntry(
            code=code,
            description=descriptions[code],
            method=operation.method,
            path=operation.path,
        )
        for code in codes
    ]


def build_context(
    operation: Operation, custom_comments: list[str] | None = None,
) -> TestRenderContext:
    """Build the full template context for an operation."""
    return TestRenderContext(
        package_name=sanitize_package_name(operation.tag),
        test_name=build_test_name(operation.operation_id),
        method=operation.method,
        path=operation.path,
        summary=operation.summary,
        description=operation.description,
        responses=build_response_entries(operation),
        custom_comments=custom_comments,
    )
