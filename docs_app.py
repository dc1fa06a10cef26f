# docs_app.py: WSGI app serving the assembled OpenAPI document (JSON, flat projection, YAML)

import hashlib
import logging
from typing import Callable, Tuple

from flask import Flask, request, jsonify, Response
from flask_cors import CORS

import config
from openapi_doc import AssemblyError, build_spec
from openapi_doc.base import Server
from openapi_doc.render import to_flat_yaml, to_json, to_yaml

log = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)


def _build() -> dict:
    meta = config.default_meta()
    if config.OPENAPI_INJECT_REQUEST_SERVER:
        meta = meta.with_servers(Server(request.host_url.rstrip("/"), "This server"))
    return build_spec(meta, include_leaderboard=config.OPENAPI_INCLUDE_LEADERBOARD)


def _render(renderer: Callable[[dict], str], mimetype: str) -> Response:
    try:
        payload = renderer(_build())
    except AssemblyError as e:
        log.error("OpenAPI assembly failed: %s", e)
        return jsonify(config.wrap(error=e)), 500

    etag = hashlib.sha256(payload.encode("utf-8")).hexdigest()

    inm = request.headers.get("If-None-Match")
    if inm and inm.strip('"') == etag:
        resp = Response(status=304)
    else:
        resp = Response(payload, status=200, mimetype=mimetype)

    resp.headers["ETag"] = f'"{etag}"'
    resp.headers["Cache-Control"] = "no-store, max-age=0, must-revalidate"
    return resp


# -------- OpenAPI --------
@app.route("/openapi.json", methods=["GET", "HEAD"])  # canonical
@app.route("/.well-known/openapi.json", methods=["GET", "HEAD"])  # discovery
def openapi_json() -> Response:
    return _render(to_json, "application/json")


@app.get("/openapi.yaml")
def openapi_flat_yaml() -> Response:
    # flattened projection, not parseable YAML
    return _render(to_flat_yaml, "text/plain")


@app.get("/openapi.strict.yaml")
def openapi_yaml() -> Response:
    return _render(to_yaml, "application/yaml")


# -------- Health --------
@app.get("/")
def root() -> Tuple[Response, int]:
    return jsonify({"ok": True, "service": "crosspost-openapi"}), 200


@app.get("/_healthz")
def healthz() -> Tuple[Response, int]:
    return jsonify({"ok": True}), 200


if __name__ == "__main__":
    config.configure_logging()
    app.run(host="0.0.0.0", port=8000, debug=True)
