# ==================================================
# openapi_doc/schemas_rate_limits.py
# ==================================================
from .common import envelope, obj, prop, ref

_RESET = "Timestamp when the rate limit resets (in seconds since epoch)"


def _status_ref(description: str) -> dict:
    return {**ref("RateLimitStatus"), "description": description}


def get() -> dict:
    return {
        # per-signer daily usage limits
        "UsageRateLimitStatus": obj({
            "signerId": prop("string", "NEAR account ID", example="example.near"),
            "endpoint": prop("string", "Endpoint being rate limited", example="post"),
            "limit": prop("number", "Maximum number of requests allowed per day", example=10),
            "remaining": prop("number", "Number of requests remaining for the current day", example=5),
            "reset": prop("number", _RESET, example=1617235200),
        }, required=["signerId", "endpoint", "limit", "remaining", "reset"]),
        "UsageRateLimitResponse": envelope(ref("UsageRateLimitStatus")),
        # requests
        "RateLimitCheckRequest": obj({
            "rateLimitStatus": _status_ref("Rate limit status object to check"),
            "action": prop("string", "Action to check rate limits for (e.g., post, like)", example="post"),
        }, required=["rateLimitStatus"]),
        "RateLimitObsoleteRequest": obj({
            "rateLimitStatus": _status_ref("Rate limit status object to check for obsolescence"),
        }, required=["rateLimitStatus"]),
        # responses
        "RateLimitStatus": obj({
            "limit": prop("number", "Maximum number of requests allowed in the window"),
            "remaining": prop("number", "Number of requests remaining in the current window"),
            "reset": prop("number", _RESET),
            "endpoint": prop("string", "Endpoint path"),
        }, required=["limit", "remaining", "reset", "endpoint"]),
        "RateLimitStatusResponse": envelope(ref("RateLimitStatus")),
        "AllRateLimitsResponse": envelope(prop(
            "object", "Rate limit statuses for various endpoints",
            additionalProperties=ref("RateLimitStatus"),
        )),
        "RateLimitCheckResponse": envelope(obj({
            "isRateLimited": prop("boolean", "Whether the rate limit has been hit"),
        }, required=["isRateLimited"])),
        "RateLimitObsoleteResponse": envelope(obj({
            "isObsolete": prop("boolean", "Whether the rate limit status is obsolete"),
        }, required=["isObsolete"])),
    }
