# ==============================================
# openapi_doc/build.py: fragment registry and build entry points
# ==============================================
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .assemble import assemble
from .base import BASE_META, DocumentMeta
from .merge import merge_paths, merge_schemas
from .refs import resolve_refs
from .render import to_flat_yaml, to_json

from .paths_auth import get as auth_paths
from .paths_posts import get as post_paths
from .paths_media import get as media_paths
from .paths_rate_limits import get as rate_limit_paths
from .paths_leaderboard import get as leaderboard_paths

from .schemas_common import get as common_schemas
from .schemas_auth import get as auth_schemas
from .schemas_posts import get as post_schemas
from .schemas_media import get as media_schemas
from .schemas_rate_limits import get as rate_limit_schemas
from .schemas_leaderboard import get as leaderboard_schemas

log = logging.getLogger(__name__)

FragmentSource = Tuple[str, Callable[[], Dict]]

# Order here is the order of `paths` / `components.schemas` in the output
PATH_FRAGMENTS: List[FragmentSource] = [
    ("auth", auth_paths),
    ("posts", post_paths),
    ("media", media_paths),
    ("rate-limits", rate_limit_paths),
    ("leaderboard", leaderboard_paths),
]

SCHEMA_FRAGMENTS: List[FragmentSource] = [
    ("common", common_schemas),
    ("auth", auth_schemas),
    ("posts", post_schemas),
    ("media", media_schemas),
    ("rate-limits", rate_limit_schemas),
    ("leaderboard", leaderboard_schemas),
]


def _load(sources: Sequence[FragmentSource]):
    return [(name, getter()) for name, getter in sources]


def build_spec(
    meta: Optional[DocumentMeta] = None,
    path_fragments: Optional[Sequence[FragmentSource]] = None,
    schema_fragments: Optional[Sequence[FragmentSource]] = None,
    include_leaderboard: bool = True,
) -> dict:
    """Merge, resolve and assemble one fresh document.

    Raises DuplicateRouteError, DuplicateSchemaError or
    UnresolvedReferenceError before anything is assembled.
    """
    path_sources = list(PATH_FRAGMENTS if path_fragments is None else path_fragments)
    if not include_leaderboard:
        path_sources = [(n, g) for n, g in path_sources if n != "leaderboard"]
    schema_sources = SCHEMA_FRAGMENTS if schema_fragments is None else schema_fragments

    paths = merge_paths(_load(path_sources))
    schemas = merge_schemas(_load(schema_sources))
    checked = resolve_refs(paths, schemas)

    spec = assemble(paths, schemas, meta or BASE_META)
    log.info(
        "assembled OpenAPI document: %d paths, %d schemas, %d references checked",
        len(paths), len(schemas), checked,
    )
    return spec


def generate_openapi_json(meta: Optional[DocumentMeta] = None, **kwargs) -> str:
    return to_json(build_spec(meta, **kwargs))


def generate_openapi_yaml(meta: Optional[DocumentMeta] = None, **kwargs) -> str:
    """Legacy flattened projection; see render.flatten."""
    return to_flat_yaml(build_spec(meta, **kwargs))
