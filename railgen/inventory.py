"""Report which operations already have a generated test file.

An operation counts as implemented when its expected test file exists;
file contents are never inspected. Operations without an operationId have
no file name and are left out.
"""

from __future__ import annotations

import itertools
import logging
from pathlib import Path

from .files import file_exists, target_path
from .models import OperationInventoryItem, SpecDocument

logger = logging.getLogger(__name__)


def build_inventory(document: SpecDocument, output_root: Path | str) -> list[OperationInventoryItem]:
    """Collect every identified operation, sorted by (tag, operationId)."""
    items: list[OperationInventoryItem] = []
    for operation in document.operations:
        if not operation.operation_id:
            continue
        path = target_path(output_root, operation.tag, operation.operation_id)
        items.append(
            OperationInventoryItem(
                operation_id=operation.operation_id,
                method=operation.method,
                path=operation.path,
                tag=operation.tag,
                summary=operation.summary,
                description=operation.description,
                implemented=file_exists(path),
            )
        )

    items.sort(key=lambda item: (item.tag, item.operation_id))
    logger.debug(
        "Inventory: %d operations, %d implemented",
        len(items), sum(item.implemented for item in items),
    )
    return items


def format_percentage(implemented: int, total: int) -> str:
    """Implemented share to one decimal, or N/A when there is nothing to count."""
    if total == 0:
        return "N/A"
    return f"{implemented / total * 100:.1f}%"


def _group_header(tag: str) -> list[str]:
    return [f"[{tag}]", "-" * (len(tag) + 2)]


def _grouped(items: list[OperationInventoryItem]):
    return itertools.groupby(items, key=lambda item: item.tag)


def format_all_report(items: list[OperationInventoryItem]) -> list[str]:
    """Checkbox listing of every operation, grouped by tag."""
    title = "All Operation IDs:"
    lines = [title, "=" * len(title)]

    for index, (tag, group) in enumerate(_grouped(items)):
        if index:
            lines.append("")
        lines.extend(_group_header(tag))
        for item in group:
            status = "[x]" if item.implemented else "[ ]"
            lines.append(f"{status} {item.operation_id}")
            lines.append(f"    {item.method} {item.path}")
            lines.append("")

    implemented = sum(item.implemented for item in items)
    total = len(items)
    lines.append(
        f"Implementation Status: {implemented}/{total} ({format_percentage(implemented, total)})"
    )
    return lines


def format_unimplemented_report(items: list[OperationInventoryItem]) -> list[str]:
    """Bulleted listing of operations that still lack a test file."""
    title = "Unimplemented Operation IDs:"
    lines = [title, "=" * len(title)]

    pending = [item for item in items if not item.implemented]
    for index, (tag, group) in enumerate(_grouped(pending)):
        if index:
            lines.append("")
        lines.extend(_group_header(tag))
        for item in group:
            lines.append(f"* {item.operation_id}")
            lines.append(f"  {item.method} {item.path}")
            lines.append("")

    if pending:
        lines.append(f"Total unimplemented: {len(pending)}")
    else:
        lines.append("All operations have been implemented!")
    return lines
