# ==============================================
# openapi_doc/assemble.py: root document construction
# ==============================================
from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping

from .base import DocumentMeta


def _plain(value: Any) -> Any:
    """Deep-copy into plain dicts/lists so the document shares nothing with its inputs."""
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return deepcopy(value)


def _info(meta: DocumentMeta) -> Dict[str, Any]:
    info: Dict[str, Any] = {
        "title": meta.title,
        "description": meta.description,
        "version": meta.version,
    }
    if meta.contact is not None:
        info["contact"] = _plain(meta.contact)
    if meta.license is not None:
        info["license"] = _plain(meta.license)
    return info


def _named(pairs, key: str):
    out = []
    for first, description in pairs:
        entry = {key: first}
        if description is not None:
            entry["description"] = description
        out.append(entry)
    return out


def assemble(
    paths: Mapping[str, Any],
    schemas: Mapping[str, Any],
    meta: DocumentMeta,
) -> Dict[str, Any]:
    """Build the root document. Inputs are assumed merged and resolved.

    Key order is fixed so identical inputs always serialize identically.
    """
    return {
        "openapi": meta.openapi,
        "info": _info(meta),
        "servers": _named(meta.servers, "url"),
        "tags": _named(meta.tags, "name"),
        "paths": _plain(paths),
        "components": {
            "schemas": _plain(schemas),
            "securitySchemes": _plain(meta.security_schemes),
        },
        "security": _plain(meta.security),
    }
