# ==================================================
# openapi_doc/common.py: building blocks for path fragments
# ==================================================
from typing import Any, Dict, List, Optional

ERROR_DESCRIPTIONS = {
    "400": "Invalid request",
    "401": "Unauthorized",
    "403": "Forbidden",
    "413": "Payload too large",
    "415": "Unsupported media type",
    "429": "Rate limit exceeded",
    "500": "Internal server error",
}


def ref(name: str) -> Dict[str, str]:
    return {"$ref": f"#/components/schemas/{name}"}


def json_content(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"application/json": {"schema": schema}}


def json_body(name: str) -> Dict[str, Any]:
    """Required JSON request body pointing at a named schema."""
    return {"required": True, "content": json_content(ref(name))}


def response(description: str, schema_name: str) -> Dict[str, Any]:
    return {"description": description, "content": json_content(ref(schema_name))}


def error_responses(*codes: str, not_found: str = "Not found",
                    schema: str = "ErrorResponse") -> Dict[str, Any]:
    out = {}
    for code in codes:
        desc = not_found if code == "404" else ERROR_DESCRIPTIONS[code]
        out[code] = response(desc, schema)
    return out


def responses(ok: str, ok_schema: str, *errors: str, not_found: str = "Not found",
              error_schema: str = "ErrorResponse") -> Dict[str, Any]:
    """200 plus the given error status codes, all errors sharing one schema."""
    out = {"200": response(ok, ok_schema)}
    out.update(error_responses(*errors, not_found=not_found, schema=error_schema))
    return out


def path_param(name: str, description: str, **schema: Any) -> Dict[str, Any]:
    return {
        "name": name,
        "in": "path",
        "required": True,
        "schema": {"type": "string", **schema},
        "description": description,
    }


def query_param(name: str, description: str, required: bool = False, **schema: Any) -> Dict[str, Any]:
    param: Dict[str, Any] = {"name": name, "in": "query"}
    if required:
        param["required"] = True
    param["schema"] = {"type": "string", **schema} if "type" not in schema else dict(schema)
    param["description"] = description
    return param


def platform_param(description: str) -> Dict[str, Any]:
    return path_param("platform", description, enum=["twitter"])


def security(*schemes: str) -> List[Dict[str, List[str]]]:
    return [{name: [] for name in schemes}]


# ---------- schema fragment helpers ----------

def prop(type_: str, description: str, **extra: Any) -> Dict[str, Any]:
    return {"type": type_, **extra, "description": description}


def obj(properties: Dict[str, Any], required: Optional[List[str]] = None, **extra: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": "object"}
    if required:
        out["required"] = list(required)
    out["properties"] = properties
    out.update(extra)
    return out


def envelope(data: Dict[str, Any], meta: bool = True) -> Dict[str, Any]:
    """Standard `{data, meta}` response body used by every proxy endpoint."""
    properties = {"data": data}
    if meta:
        properties["meta"] = ref("ResponseMeta")
    return obj(properties, required=["data"])


def success_envelope(verb: str, id_field: Optional[str] = None, id_label: str = "") -> Dict[str, Any]:
    """`{data: {success, <id>}}` acknowledgement body."""
    data = {"success": prop("boolean", f"Whether the {verb}")}
    if id_field:
        data[id_field] = prop("string", id_label)
    return envelope(obj(data, required=["success"]))
