"""Per-invocation configuration for railgen commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SPEC_FILE = "openapi.yaml"
DEFAULT_OUTPUT_DIR = "test"


@dataclass(frozen=True)
class RunConfig:
    """Options for a single command run, built once from the CLI flags."""

    spec_file: Path = Path(DEFAULT_SPEC_FILE)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    operation_id: str = ""
    comments_file: Path | None = None
    overwrite: bool = False
    unimplemented_only: bool = False
