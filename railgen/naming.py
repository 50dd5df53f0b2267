"""Convert operation IDs and tags to Go names and file names.

  operationId -> test function:  addPet       -> TestAddPet
  operationId -> file name:      addPet       -> add_pet_test.go
  tag         -> package:        Pet Store    -> pet_store

The snake_case rule is a plain character scan: every uppercase letter after
the first character gets a leading underscore. Runs of capitals are not
treated as acronyms (getPetByID -> get_pet_by_i_d). generate, delete and
list all derive file names from it, so it must stay this simple.
"""

from __future__ import annotations

import re

TEST_NAME_PREFIX = "Test"
TEST_FILE_SUFFIX = "_test.go"
DEFAULT_PACKAGE = "api"

_WORD_SEPARATORS = re.compile(r"[_\- ]+")


def to_pascal_case(name: str) -> str:
    """Split on '_', '-' and ' ', capitalize each segment's first letter."""
    parts = [p for p in _WORD_SEPARATORS.split(name) if p]
    return "".join(p[0].upper() + p[1:] for p in parts)


def to_snake_case(name: str) -> str:
    """Insert '_' before each non-leading uppercase letter, then lowercase."""
    chars: list[str] = []
    for i, ch in enumerate(name):
        if i > 0 and "A" <= ch <= "Z":
            chars.append("_")
        chars.append(ch)
    return "".join(chars).lower()


def sanitize_package_name(tag: str) -> str:
    """Map a free-text tag to a Go package name."""
    if not tag:
        return DEFAULT_PACKAGE
    return tag.lower().replace("-", "_").replace(" ", "_")


def build_test_name(operation_id: str) -> str:
    return TEST_NAME_PREFIX + to_pascal_case(operation_id)


def build_file_name(operation_id: str) -> str:
    return to_snake_case(operation_id) + TEST_FILE_SUFFIX

