# ==============================================
# openapi_doc/refs.py: $ref collection and resolution
# ==============================================
"""
Checks that every `#/components/schemas/<Name>` pointer in the merged
paths and schemas names a key of the merged schema table.

Resolution is a name lookup only; referenced schemas are never expanded,
so reference cycles (A -> B -> A) terminate like any other graph.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Mapping, Tuple

from .errors import UnresolvedReferenceError

log = logging.getLogger(__name__)

SCHEMA_REF_PREFIX = "#/components/schemas/"

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

# Values under these keys are literal data, not schema objects
LITERAL_KEYS = ("example", "examples", "default", "enum", "const")

# Keys of these maps are property names, so a property called "default" is still a schema
_NAME_MAPS = ("properties", "patternProperties")


def ref_name(pointer: str):
    """Return the schema name a local pointer targets, or None.

    Only the first segment after the prefix names the schema, so
    "#/components/schemas/Pet/properties/id" targets "Pet". The segment
    is a JSON pointer token: "~1" is "/" and "~0" is "~".
    """
    if not isinstance(pointer, str) or not pointer.startswith(SCHEMA_REF_PREFIX):
        return None
    token = pointer[len(SCHEMA_REF_PREFIX):].split("/", 1)[0]
    return token.replace("~1", "/").replace("~0", "~")


def iter_refs(node: Any, origin: str) -> Iterator[Tuple[str, str]]:
    """Yield (schema_name, origin) for every schema $ref inside `node`.

    Example and default values are skipped; a `$ref` key inside them is data.
    """
    # (value, keys_are_property_names)
    stack = [(node, False)]
    while stack:
        cur, named = stack.pop()
        if isinstance(cur, Mapping):
            if not named:
                name = ref_name(cur.get("$ref"))
                if name is not None:
                    yield name, origin
            children = [
                (value, not named and key in _NAME_MAPS)
                for key, value in cur.items()
                if named or key not in LITERAL_KEYS
            ]
            # reversed keeps document order when popping
            stack.extend(reversed(children))
        elif isinstance(cur, (list, tuple)):
            stack.extend((item, False) for item in reversed(cur))


def _path_origins(paths: Mapping[str, Any]) -> Iterator[Tuple[str, Any]]:
    for route, item in paths.items():
        if not isinstance(item, Mapping):
            yield route, item
            continue
        for key, value in item.items():
            if str(key).lower() in HTTP_METHODS:
                yield f"{str(key).upper()} {route}", value
            else:
                yield route, value


def collect_refs(paths: Mapping[str, Any], schemas: Mapping[str, Any]) -> Dict[str, str]:
    """Map each referenced schema name to the first origin that used it."""
    seen: Dict[str, str] = {}
    for origin, node in _path_origins(paths):
        for name, where in iter_refs(node, origin):
            seen.setdefault(name, where)
    for schema_name, node in schemas.items():
        for name, where in iter_refs(node, f"components.schemas.{schema_name}"):
            seen.setdefault(name, where)
    return seen


def resolve_refs(paths: Mapping[str, Any], schemas: Mapping[str, Any]) -> int:
    """Verify every schema reference resolves; return how many names were checked.

    Raises UnresolvedReferenceError for the first dangling name, carrying
    all of them in `.missing`.
    """
    targets = collect_refs(paths, schemas)
    missing = {name: origin for name, origin in targets.items() if name not in schemas}
    if missing:
        name, origin = next(iter(missing.items()))
        raise UnresolvedReferenceError(name, origin, missing)
    log.debug("resolved %d distinct schema references", len(targets))
    return len(targets)
