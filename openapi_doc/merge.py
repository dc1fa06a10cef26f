# ==============================================
# openapi_doc/merge.py: fragment aggregation
# ==============================================
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Tuple, Type

from .errors import DuplicateRouteError, DuplicateSchemaError, DuplicateKeyError

log = logging.getLogger(__name__)

# (fragment name, {key: opaque value})
Fragment = Tuple[str, Mapping[str, Any]]


def merge_fragments(
    fragments: Iterable[Fragment],
    error_cls: Type[DuplicateKeyError],
) -> Dict[str, Any]:
    """Reduce named fragments into one dict, refusing to overwrite any key.

    Order is first-seen order across fragments, in the order given.
    Values are relocated as-is; fragments are left untouched.
    """
    if isinstance(fragments, Mapping):
        fragments = fragments.items()
    merged: Dict[str, Any] = {}
    owner: Dict[str, str] = {}
    for name, table in fragments:
        if not isinstance(table, Mapping):
            raise TypeError(f"Fragment {name!r} must be a mapping, got {type(table).__name__}")
        for key, value in table.items():
            if key in merged:
                raise error_cls(key, owner[key], name)
            merged[key] = value
            owner[key] = name
        log.debug("merged fragment %s (%d keys)", name, len(table))
    return merged


def merge_paths(fragments: Iterable[Fragment]) -> Dict[str, Any]:
    return merge_fragments(fragments, DuplicateRouteError)


def merge_schemas(fragments: Iterable[Fragment]) -> Dict[str, Any]:
    return merge_fragments(fragments, DuplicateSchemaError)
