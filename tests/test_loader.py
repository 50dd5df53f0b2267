"""Tests for the loader module."""

import json

import pytest

from railgen.errors import LoadError
from railgen.loader import load_document, resolve_ref


class TestLoadDocument:
    """Test loading and indexing of the pet store document."""

    def test_operations_in_document_order(self, document):
        ids = [op.operation_id for op in document.operations]
        assert ids == ["addPet", "updatePet", "getPetByID", "getInventory", "health-check", ""]

    def test_path_level_parameters_are_not_operations(self, document):
        assert all(op.method != "PARAMETERS" for op in document.operations)

    def test_method_uppercased(self, document):
        assert document.operations[0].method == "POST"
        assert document.operations[0].path == "/pet"

    def test_integer_codes_become_strings(self, document):
        add_pet = document.operations[0]
        assert add_pet.responses == (
            ("default", "Unexpected"),
            ("400", "Invalid"),
            ("200", "Successful"),
        )

    def test_response_ref_resolved(self, document):
        update_pet = document.operations[1]
        assert ("404", "Pet not found") in update_pet.responses

    def test_primary_tag(self, document):
        assert document.operations[3].tag == "Store Front"
        assert document.operations[4].tag == ""

    def test_json_document(self, tmp_path):
        path = tmp_path / "openapi.json"
        path.write_text(json.dumps({
            "openapi": "3.1.0",
            "paths": {"/a": {"get": {"operationId": "getA", "responses": {}}}},
        }))
        document = load_document(path)
        assert [op.operation_id for op in document.operations] == ["getA"]

    def test_missing_paths_is_empty(self, write_spec):
        document = load_document(write_spec({"openapi": "3.0.0", "info": {}}))
        assert document.operations == ()


class TestPathItemRefs:
    """Path items given as $ref are followed before scanning methods."""

    def _spec(self, path_item):
        return {
            "openapi": "3.1.0",
            "paths": {"/pets": path_item},
            "components": {"pathItems": {
                "Pets": {"get": {
                    "operationId": "listPets",
                    "tags": ["pet"],
                    "responses": {"200": {"description": "ok"}},
                }},
                "Alias": {"$ref": "#/components/pathItems/Pets"},
                "LoopA": {"$ref": "#/components/pathItems/LoopB"},
                "LoopB": {"$ref": "#/components/pathItems/LoopA"},
            }},
        }

    def test_ref_followed(self, write_spec):
        document = load_document(write_spec(self._spec({"$ref": "#/components/pathItems/Pets"})))
        assert [(op.operation_id, op.method, op.path) for op in document.operations] == [
            ("listPets", "GET", "/pets"),
        ]

    def test_chained_ref(self, write_spec):
        document = load_document(write_spec(self._spec({"$ref": "#/components/pathItems/Alias"})))
        assert document.operations[0].operation_id == "listPets"

    def test_circular_ref(self, write_spec):
        with pytest.raises(LoadError, match="circular"):
            load_document(write_spec(self._spec({"$ref": "#/components/pathItems/LoopA"})))

    def test_unresolvable_ref(self, write_spec):
        with pytest.raises(LoadError, match="unresolvable"):
            load_document(write_spec(self._spec({"$ref": "#/components/pathItems/Nope"})))


class TestLoadErrors:
    """Documents the loader must reject."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError):
            load_document(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("openapi: [3.0\n  paths: {")
        with pytest.raises(LoadError):
            load_document(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(LoadError):
            load_document(path)

    def test_missing_version(self, write_spec):
        with pytest.raises(LoadError, match="openapi"):
            load_document(write_spec({"paths": {}}))

    def test_swagger_2_rejected(self, write_spec):
        with pytest.raises(LoadError, match="unsupported"):
            load_document(write_spec({"openapi": "2.0", "paths": {}}))

    def test_unresolvable_response_ref(self, write_spec):
        spec = {
            "openapi": "3.0.0",
            "paths": {"/a": {"get": {
                "operationId": "getA",
                "responses": {"404": {"$ref": "#/components/responses/Missing"}},
            }}},
        }
        with pytest.raises(LoadError, match="Missing"):
            load_document(write_spec(spec))


class TestResolveRef:

    def test_nested(self):
        spec = {"components": {"responses": {"NotFound": {"description": "nope"}}}}
        assert resolve_ref(spec, "#/components/responses/NotFound") == {"description": "nope"}

    def test_escaped_slash(self):
        spec = {"paths": {"/pet": {"get": {}}}}
        assert resolve_ref(spec, "#/paths/~1pet/get") == {}

    def test_external_ref_rejected(self):
        with pytest.raises(LoadError):
            resolve_ref({}, "other.yaml#/components/schemas/Pet")
