"""Load an OpenAPI 3.x document and index its operations.

Reads YAML (or JSON, by file suffix) and flattens paths -> methods into an
ordered tuple of Operation records, built once per load.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import LoadError
from .models import Operation, SpecDocument

logger = logging.getLogger(__name__)

# Path item keys that hold operations, as opposed to parameters/servers/etc.
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def load_spec(path: Path) -> dict[str, Any]:
    """Load the OpenAPI spec from disk."""
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                spec = json.load(f)
            else:
                spec = yaml.safe_load(f)
    except OSError as exc:
        raise LoadError(f"cannot read {path}: {exc}") from exc
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise LoadError(f"cannot parse {path}: {exc}") from exc

    if not isinstance(spec, dict):
        raise LoadError(f"{path} is not an OpenAPI document")

    version = spec.get("openapi")
    if version is None:
        raise LoadError(f"{path} has no 'openapi' version field")
    if not str(version).startswith("3."):
        raise LoadError(f"{path}: unsupported OpenAPI version {version!r}")

    return spec


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract the paths mapping from a document."""
    paths = spec.get("paths") or {}
    if not isinstance(paths, dict):
        raise LoadError("'paths' must be a mapping")
    return paths


def resolve_ref(spec: dict[str, Any], ref: str) -> dict[str, Any]:
    """Resolve a local $ref pointer within the document."""
    if not ref.startswith("#/"):
        raise LoadError(f"unsupported $ref {ref!r}: only local references are resolved")
    node: Any = spec
    for part in ref[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(node, dict) or part not in node:
            raise LoadError(f"unresolvable $ref {ref!r}")
        node = node[part]
    return node


def _follow_refs(spec: dict[str, Any], node: Any) -> Any:
    """Follow a chain of local $refs to the object it points at."""
    seen: set[str] = set()
    while isinstance(node, dict) and "$ref" in node:
        ref = node["$ref"]
        if ref in seen:
            raise LoadError(f"circular $ref {ref!r}")
        seen.add(ref)
        node = resolve_ref(spec, ref)
    return node


def _response_description(spec: dict[str, Any], response: Any) -> str:
    response = _follow_refs(spec, response)
    if not isinstance(response, dict):
        return ""
    return str(response.get("description") or "")


def _parse_responses(spec: dict[str, Any], operation: dict[str, Any]) -> tuple[tuple[str, str], ...]:
    responses = operation.get("responses") or {}
    if not isinstance(responses, dict):
        raise LoadError("'responses' must be a mapping")
    # YAML reads unquoted status codes (200:) as ints
    return tuple(
        (str(code), _response_description(spec, response))
        for code, response in responses.items()
    )


def _build_operation(
    spec: dict[str, Any], path: str, method: str, operation: Any,
) -> Operation:
    if not isinstance(operation, dict):
        raise LoadError(f"{method.upper()} {path}: operation must be a mapping")

    tags = operation.get("tags") or []
    if not isinstance(tags, list):
        raise LoadError(f"{method.upper()} {path}: 'tags' must be a list")

    return Operation(
        operation_id=str(operation.get("operationId") or ""),
        method=method.upper(),
        path=path,
        tags=tuple(str(t) for t in tags),
        summary=str(operation.get("summary") or ""),
        description=str(operation.get("description") or ""),
        responses=_parse_responses(spec, operation),
    )


def iter_operations(spec: dict[str, Any]) -> list[Operation]:
    """Flatten paths then methods into operations, in document order."""
    operations: list[Operation] = []
    for path, path_item in get_paths(spec).items():
        path_item = _follow_refs(spec, path_item)
        if path_item is None:
            continue
        if not isinstance(path_item, dict):
            raise LoadError(f"path item {path!r} must be a mapping")
        for method, operation in path_item.items():
            method = str(method).lower()
            if method not in HTTP_METHODS:
                continue
            operations.append(_build_operation(spec, str(path), method, operation))
    return operations


def load_document(path: Path | str) -> SpecDocument:
    """Load a document from disk and index its operations."""
    source = Path(path)
    spec = load_spec(source)
    operations = tuple(iter_operations(spec))
    logger.debug("Loaded %s: %d operations", source, len(operations))
    return SpecDocument(source=source, operations=operations)
