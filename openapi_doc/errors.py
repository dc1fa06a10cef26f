# ==============================================
# openapi_doc/errors.py: assembly failure taxonomy
# ==============================================
"""Errors raised while assembling the OpenAPI document.

All of them are authoring defects in the fragment tables: they are
deterministic, so retrying with the same fragments fails the same way.
"""
from __future__ import annotations

from typing import Dict, Optional


class AssemblyError(Exception):
    """Base class for fragment-table defects found during assembly."""


class DuplicateKeyError(AssemblyError):
    kind = "key"

    def __init__(self, key: str, first: str, second: str):
        self.key = key
        self.first = first
        self.second = second
        super().__init__(
            f"Duplicate {self.kind} {key!r}: defined in fragment {first!r} "
            f"and again in fragment {second!r}"
        )


class DuplicateRouteError(DuplicateKeyError):
    kind = "route"


class DuplicateSchemaError(DuplicateKeyError):
    kind = "schema"


class UnresolvedReferenceError(AssemblyError):
    """A `$ref` names a schema that is not in components.schemas.

    `missing` maps every dangling schema name found in the run to the first
    place that referenced it; `name`/`origin` is the first of those.
    """

    def __init__(self, name: str, origin: str, missing: Optional[Dict[str, str]] = None):
        self.name = name
        self.origin = origin
        self.missing = dict(missing) if missing else {name: origin}
        msg = f"Unresolved reference to schema {name!r} (from {origin})"
        others = [n for n in self.missing if n != name]
        if others:
            msg += f"; also unresolved: {', '.join(repr(n) for n in others)}"
        super().__init__(msg)
