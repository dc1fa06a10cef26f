# ==================================================
# openapi_doc/paths_rate_limits.py: /rate-limits/*
# ==================================================
from .common import json_body, path_param, platform_param, query_param, responses, security


def _platform():
    p = platform_param("Platform name")
    p["example"] = "twitter"
    return p


def _op(op_id, summary, description, ok, ok_schema, errors, **extra):
    op = {
        "tags": ["rate-limits"],
        "summary": summary,
        "description": description,
        "operationId": op_id,
    }
    op.update(extra)
    op["responses"] = responses(ok, ok_schema, *errors)
    op["security"] = security("apiKey")
    return op


def get() -> dict:
    endpoint = path_param("endpoint", "Endpoint path")
    endpoint["example"] = "/2/tweets"
    checks = ("400", "401", "403", "500")
    return {
        "/rate-limits/{platform}": {
            "get": _op("getAllRateLimits", "Get all rate limits",
                       "Get rate limit status for all endpoints for a specific platform",
                       "Rate limit statuses retrieved successfully", "AllRateLimitsResponse",
                       ("401", "403", "500"),
                       parameters=[_platform()]),
        },
        "/rate-limits/{platform}/{endpoint}": {
            "get": _op("getRateLimitStatus", "Get rate limit status",
                       "Get rate limit status for a specific endpoint on a specific platform",
                       "Rate limit status retrieved successfully", "RateLimitStatusResponse",
                       checks,
                       parameters=[
                           _platform(),
                           endpoint,
                           query_param("version", "API version", enum=["v1", "v2"], default="v2"),
                       ]),
        },
        "/rate-limits/{platform}/check": {
            "post": _op("isRateLimited", "Check if rate limited",
                        "Check if a rate limit has been hit for a specific platform",
                        "Rate limit check successful", "RateLimitCheckResponse",
                        checks,
                        parameters=[_platform()],
                        requestBody=json_body("RateLimitCheckRequest")),
        },
        "/rate-limits/{platform}/obsolete": {
            "post": _op("isRateLimitObsolete", "Check if rate limit is obsolete",
                        "Check if a rate limit status is obsolete (reset time has passed) "
                        "for a specific platform",
                        "Rate limit obsolete check successful", "RateLimitObsoleteResponse",
                        checks,
                        parameters=[_platform()],
                        requestBody=json_body("RateLimitObsoleteRequest")),
        },
    }
