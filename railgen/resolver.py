"""Look up a single operation by operationId."""

from __future__ import annotations

import logging

from .errors import OperationNotFound
from .models import Operation, SpecDocument

logger = logging.getLogger(__name__)


def find_operation(document: SpecDocument, operation_id: str) -> Operation:
    """Return the first operation whose operationId equals operation_id exactly.

    Operations are scanned in document order. Duplicate IDs are not
    detected; the first occurrence wins.
    """
    for operation in document.operations:
        if operation.operation_id == operation_id:
            logger.debug(
                "Resolved %s to %s %s (tag %r)",
                operation_id, operation.method, operation.path, operation.tag,
            )
            return operation
    raise OperationNotFound(operation_id)
