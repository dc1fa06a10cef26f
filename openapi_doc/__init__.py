# openapi_doc/__init__.py
"""
Assembles the proxy's OpenAPI document from per-resource fragments and
renders it as JSON (canonical) or the flattened YAML projection.
"""

from .build import build_spec, generate_openapi_json, generate_openapi_yaml
from .errors import (
    AssemblyError,
    DuplicateRouteError,
    DuplicateSchemaError,
    UnresolvedReferenceError,
)

__all__ = [
    "build_spec",
    "generate_openapi_json",
    "generate_openapi_yaml",
    "AssemblyError",
    "DuplicateRouteError",
    "DuplicateSchemaError",
    "UnresolvedReferenceError",
]
