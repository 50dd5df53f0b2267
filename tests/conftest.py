"""Shared fixtures: a small pet store document written to a temp directory."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from railgen.loader import load_document


# ---------------------------------------------------------------------------
# Spec fixtures
# ---------------------------------------------------------------------------

PETSTORE_YAML = """\
openapi: 3.0.3
info:
  title: Pet Store
  version: 1.0.0
paths:
  /pet:
    parameters:
      - name: trace
        in: header
        schema:
          type: string
    post:
      operationId: addPet
      tags: [pet]
      summary: Add a new pet to the store
      description: Creates a pet record.
      responses:
        default:
          description: Unexpected
        400:
          description: Invalid
        200:
          description: Successful
    put:
      operationId: updatePet
      tags: [pet]
      responses:
        "404":
          $ref: "#/components/responses/NotFound"
        "200":
          description: Updated
  /pet/{id}:
    get:
      operationId: getPetByID
      tags: [pet]
      summary: Find pet by ID
      responses:
        "200":
          description: Found
        "4XX":
          description: Client error
        "404":
          description: Not found
  /store/inventory:
    get:
      operationId: getInventory
      tags: [Store Front]
      responses:
        "200":
          description: Inventory
  /health:
    get:
      operationId: health-check
      responses:
        "204":
          description: Healthy
  /ping:
    get:
      responses:
        "200":
          description: Pong
components:
  responses:
    NotFound:
      description: Pet not found
"""


@pytest.fixture
def spec_file(tmp_path: Path) -> Path:
    """Write the pet store document and return its path."""
    path = tmp_path / "openapi.yaml"
    path.write_text(PETSTORE_YAML)
    return path


@pytest.fixture
def document(spec_file: Path):
    return load_document(spec_file)


@pytest.fixture
def write_spec(tmp_path: Path):
    """Return a callable that dumps a spec dict to a YAML file."""
    def _write(spec: dict[str, Any], name: str = "spec.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(spec, sort_keys=False))
        return path
    return _write


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "test"
