# tests/test_render.py
import json

import yaml

from openapi_doc.render import flatten, to_flat_yaml, to_json, to_yaml


def test_json_is_two_space_indented_and_ordered():
    text = to_json({"b": 1, "a": {"c": [1, 2]}})
    assert text == '{\n  "b": 1,\n  "a": {\n    "c": [\n      1,\n      2\n    ]\n  }\n}'


def test_json_keeps_non_ascii():
    assert to_json({"t": "café"}) == '{\n  "t": "café"\n}'


def test_json_is_idempotent_and_round_trips():
    doc = {"openapi": "3.0.3", "paths": {"/a": {"get": {"responses": {"200": {"description": "OK"}}}}}}
    assert to_json(doc) == to_json(doc)
    assert json.loads(to_json(doc)) == doc


def test_flatten_applies_literal_substitutions():
    assert flatten('{"a":"b","c":1}') == "a: bc: 1"
    assert flatten('["x", {"y": [1]}]') == "x y:  1"


def test_flat_projection_of_canonical_form():
    out = to_flat_yaml({"a": "b", "c": 1})
    assert out == "\n  a:  b\n  c:  1\n"
    assert " ".join(out.split()) == "a: b c: 1"


def test_flat_projection_loses_nesting_delimiters():
    out = to_flat_yaml({"tags": ["auth", "posts"], "info": {"title": "T"}})
    for ch in '",{}[]':
        assert ch not in out
    assert "tags:  \n" in out


def test_flatten_pads_every_colon_including_urls():
    assert flatten('"https://x"') == "https: //x"


def test_strict_yaml_parses_back_to_document():
    doc = {"paths": {"/a": {"get": {"responses": {"200": {"description": "yes"}}}}}, "on": "off"}
    text = to_yaml(doc)
    assert yaml.safe_load(text) == doc
    assert text.startswith("paths:")
