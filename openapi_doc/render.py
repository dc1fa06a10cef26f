# ==============================================
# openapi_doc/render.py: document serialization
# ==============================================
"""
Output modes for an assembled document:

- to_json: canonical form. Lossless, two-space indent, document key order.
- to_flat_yaml: the legacy "YAML" projection. It is a character-stripping
  pass over the canonical JSON, not a YAML emitter; nested blocks lose
  their structure. Downstream files depend on its exact bytes.
- to_yaml: real YAML via PyYAML, for consumers that need to parse it.
"""
from __future__ import annotations

import json
from typing import Any, Mapping

import yaml

# Applied in this order; the last rule pads colons, including the one in ": "
_STRIP = ('"', ",", "{", "}", "[", "]")


def to_json(document: Mapping[str, Any]) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False)


def flatten(text: str) -> str:
    """Strip quotes, commas, braces and brackets, then turn ':' into ': '."""
    for ch in _STRIP:
        text = text.replace(ch, "")
    return text.replace(":", ": ")


def to_flat_yaml(document: Mapping[str, Any]) -> str:
    return flatten(to_json(document))


def to_yaml(document: Mapping[str, Any]) -> str:
    # safe_dump only represents plain dict/list/str/number values
    return yaml.safe_dump(
        json.loads(to_json(document)),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
