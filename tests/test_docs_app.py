# tests/test_docs_app.py
import yaml

import config
import docs_app
from openapi_doc import DuplicateRouteError, build_spec
from openapi_doc.render import flatten, to_json

client = docs_app.app.test_client()


def test_openapi_json_served_with_etag():
    r = client.get("/openapi.json")
    assert r.status_code == 200
    assert r.mimetype == "application/json"
    assert r.get_json() == build_spec(config.default_meta())
    assert r.headers["ETag"]
    assert "no-store" in r.headers["Cache-Control"]


def test_well_known_alias_matches():
    assert client.get("/.well-known/openapi.json").data == client.get("/openapi.json").data


def test_if_none_match_gives_304():
    etag = client.get("/openapi.json").headers["ETag"]
    r = client.get("/openapi.json", headers={"If-None-Match": etag})
    assert r.status_code == 304
    assert r.data == b""


def test_flat_yaml_is_projection_of_json():
    body = client.get("/openapi.yaml").get_data(as_text=True)
    assert body == flatten(to_json(build_spec(config.default_meta())))


def test_strict_yaml_parses():
    r = client.get("/openapi.strict.yaml")
    assert r.status_code == 200
    assert yaml.safe_load(r.get_data(as_text=True)) == build_spec(config.default_meta())


def test_request_server_injection(monkeypatch):
    monkeypatch.setattr(config, "OPENAPI_INJECT_REQUEST_SERVER", True)
    spec = client.get("/openapi.json", base_url="https://docs.example.org").get_json()
    assert spec["servers"] == [{"url": "https://docs.example.org", "description": "This server"}]


def test_assembly_failure_returns_error_envelope(monkeypatch):
    def broken(*args, **kwargs):
        raise DuplicateRouteError("/dup", "posts", "media")

    monkeypatch.setattr(docs_app, "build_spec", broken)
    r = client.get("/openapi.json")
    assert r.status_code == 500
    err = r.get_json()["error"]
    assert err["type"] == "INTERNAL"
    assert "/dup" in err["message"]


def test_health():
    assert client.get("/_healthz").get_json() == {"ok": True}
    assert client.get("/").get_json()["ok"] is True
