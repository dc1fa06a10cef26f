# tests/test_build.py
import json

import pytest

from openapi_doc import (
    DuplicateRouteError,
    DuplicateSchemaError,
    UnresolvedReferenceError,
    build_spec,
    generate_openapi_json,
    generate_openapi_yaml,
)
from openapi_doc.base import BASE_META
from openapi_doc.build import PATH_FRAGMENTS, SCHEMA_FRAGMENTS
from openapi_doc.refs import collect_refs
from openapi_doc.render import flatten


def test_shipped_fragments_assemble():
    spec = build_spec()
    assert spec["openapi"] == "3.0.3"
    assert spec["info"]["title"] == BASE_META.title
    assert "/api/post" in spec["paths"]
    assert "/api/leaderboard" in spec["paths"]
    assert "CreatePostRequest" in spec["components"]["schemas"]


def test_every_shipped_reference_resolves():
    spec = build_spec()
    schemas = spec["components"]["schemas"]
    targets = collect_refs(spec["paths"], schemas)
    assert targets
    assert set(targets) <= set(schemas)


def test_paths_follow_fragment_order():
    spec = build_spec()
    routes = list(spec["paths"])
    assert routes[0] == "/auth/{platform}/login"
    assert routes.index("/auth/accounts") < routes.index("/api/post") < routes.index("/api/media")
    assert routes[-1] == "/api/activity/{signerId}/posts"
    assert list(spec["components"]["schemas"])[:2] == ["ResponseMeta", "ErrorResponse"]


def test_operation_security_names_declared_schemes():
    spec = build_spec()
    declared = set(spec["components"]["securitySchemes"])
    for item in spec["paths"].values():
        for op in item.values():
            for requirement in op.get("security", []):
                assert set(requirement) <= declared


def test_operation_ids_are_unique():
    spec = build_spec()
    ids = [op["operationId"] for item in spec["paths"].values() for op in item.values()]
    assert len(ids) == len(set(ids))


def test_leaderboard_can_be_left_out():
    spec = build_spec(include_leaderboard=False)
    assert "/api/leaderboard" not in spec["paths"]
    # schemas stay so other consumers can still reference them
    assert "LeaderboardResponse" in spec["components"]["schemas"]


def test_build_is_idempotent_and_round_trips():
    first = generate_openapi_json()
    assert first == generate_openapi_json()
    assert json.loads(first) == build_spec()


def test_yaml_output_is_flattened_json():
    assert generate_openapi_yaml() == flatten(generate_openapi_json())


def test_colliding_path_fragments_fail_before_assembly():
    frags = PATH_FRAGMENTS + [("extra", lambda: {"/api/post": {"get": {}}})]
    with pytest.raises(DuplicateRouteError) as ei:
        build_spec(path_fragments=frags)
    assert (ei.value.key, ei.value.first, ei.value.second) == ("/api/post", "posts", "extra")


def test_colliding_schema_fragments_fail():
    frags = SCHEMA_FRAGMENTS + [("extra", lambda: {"Post": {"type": "object"}})]
    with pytest.raises(DuplicateSchemaError) as ei:
        build_spec(schema_fragments=frags)
    assert ei.value.key == "Post"


def test_dangling_reference_fails():
    paths = [("widgets", lambda: {"/widgets": {"get": {"responses": {"200": {
        "description": "OK",
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Widget"}}},
    }}}}})]
    with pytest.raises(UnresolvedReferenceError) as ei:
        build_spec(path_fragments=paths)
    assert ei.value.name == "Widget"
    assert ei.value.origin == "GET /widgets"


def test_custom_fragments_and_meta():
    meta = BASE_META.with_servers()
    spec = build_spec(
        meta,
        path_fragments=[("a", lambda: {"/a": {}}), ("b", lambda: {"/b": {}})],
        schema_fragments=[],
    )
    assert spec["paths"] == {"/a": {}, "/b": {}}
    assert spec["servers"] == []
    assert spec["components"]["schemas"] == {}
