# tests/test_refs.py
import pytest

from openapi_doc.errors import UnresolvedReferenceError
from openapi_doc.refs import collect_refs, iter_refs, ref_name, resolve_refs


def _ref(name):
    return {"$ref": f"#/components/schemas/{name}"}


def _op_returning(name):
    return {"responses": {"200": {"content": {"application/json": {"schema": _ref(name)}}}}}


def test_ref_name_decodes_pointer_tokens():
    assert ref_name("#/components/schemas/Post") == "Post"
    assert ref_name("#/components/schemas/a~1b~0c") == "a/b~c"
    assert ref_name("#/components/responses/NotFound") is None
    assert ref_name("other.yaml#/Foo") is None
    assert ref_name(None) is None


def test_iter_refs_walks_nested_lists_and_dicts():
    node = {
        "oneOf": [_ref("A"), {"type": "array", "items": _ref("B")}],
        "properties": {"x": {"additionalProperties": _ref("C")}},
    }
    assert [name for name, _ in iter_refs(node, "here")] == ["A", "B", "C"]


def test_unresolved_operation_reference_names_target_and_origin():
    schemas = {"Foo": {"type": "object"}}
    paths = {"/things": {"get": _op_returning("Bar")}}
    with pytest.raises(UnresolvedReferenceError) as ei:
        resolve_refs(paths, schemas)
    assert ei.value.name == "Bar"
    assert ei.value.origin == "GET /things"
    assert "Bar" in str(ei.value) and "GET /things" in str(ei.value)


def test_unresolved_reference_inside_schema_reports_schema_origin():
    schemas = {"Post": {"properties": {"media": {"items": _ref("Media")}}}}
    with pytest.raises(UnresolvedReferenceError) as ei:
        resolve_refs({}, schemas)
    assert ei.value.name == "Media"
    assert ei.value.origin == "components.schemas.Post"


def test_all_dangling_targets_are_reported():
    paths = {
        "/a": {"post": {"requestBody": {"content": {"application/json": {"schema": _ref("X")}}}}},
        "/b": {"get": _op_returning("Y")},
        "/c": {"get": _op_returning("X")},
    }
    with pytest.raises(UnresolvedReferenceError) as ei:
        resolve_refs(paths, {})
    assert ei.value.name == "X"
    assert ei.value.missing == {"X": "POST /a", "Y": "GET /b"}


def test_resolves_when_every_target_present():
    schemas = {"Foo": {"type": "object"}, "Bar": {"properties": {"foo": _ref("Foo")}}}
    paths = {"/things": {"get": _op_returning("Bar")}}
    assert resolve_refs(paths, schemas) == 2


def test_cycles_terminate():
    schemas = {
        "Node": {"properties": {"next": _ref("Node"), "other": _ref("Other")}},
        "Other": {"properties": {"back": _ref("Node")}},
    }
    assert resolve_refs({"/n": {"get": _op_returning("Node")}}, schemas) == 2


def test_collect_refs_dedups_by_first_origin():
    paths = {
        "/a": {"parameters": [{"schema": _ref("P")}], "get": _op_returning("E")},
        "/b": {"delete": _op_returning("E")},
    }
    assert collect_refs(paths, {}) == {"P": "/a", "E": "GET /a"}


def test_ref_name_uses_first_segment_of_sub_pointer():
    assert ref_name("#/components/schemas/Pet/properties/id") == "Pet"
    assert ref_name("#/components/schemas/a~1b/properties/x") == "a/b"


def test_pointer_into_existing_schema_resolves():
    schemas = {"Pet": {"type": "object", "properties": {"id": {"type": "string"}}}}
    paths = {"/p": {"get": {"responses": {"200": {"content": {"application/json": {
        "schema": {"$ref": "#/components/schemas/Pet/properties/id"},
    }}}}}}}
    assert resolve_refs(paths, schemas) == 1


def test_pointer_into_missing_schema_reports_schema_name():
    paths = {"/p": {"get": {"parameters": [{"schema": {"$ref": "#/components/schemas/Pet/properties/id"}}]}}}
    with pytest.raises(UnresolvedReferenceError) as ei:
        resolve_refs(paths, {})
    assert ei.value.name == "Pet"
    assert ei.value.origin == "GET /p"


def test_refs_inside_example_values_are_data():
    schemas = {"Doc": {
        "type": "object",
        "example": {"$ref": "#/components/schemas/Nope"},
        "default": [{"$ref": "#/components/schemas/Nope"}],
        "properties": {"link": {"type": "object", "enum": [{"$ref": "#/components/schemas/Nope"}]}},
    }}
    paths = {"/d": {"get": {"responses": {"200": {"content": {"application/json": {
        "schema": _ref("Doc"),
        "examples": {"one": {"value": {"$ref": "#/components/schemas/Nope"}}},
    }}}}}}}
    assert collect_refs(paths, schemas) == {"Doc": "GET /d"}
    assert resolve_refs(paths, schemas) == 1


def test_properties_named_like_literal_keys_are_still_walked():
    schemas = {"Setting": {"properties": {"default": _ref("Value"), "example": {"items": _ref("Value")}}}}
    assert collect_refs({}, schemas) == {"Value": "components.schemas.Setting"}


def test_non_schema_refs_are_ignored():
    paths = {"/a": {"get": {"responses": {"404": {"$ref": "#/components/responses/NotFound"}}}}}
    assert resolve_refs(paths, {}) == 0
