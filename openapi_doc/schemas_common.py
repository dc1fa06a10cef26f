# ==================================================
# openapi_doc/schemas_common.py: shared envelope pieces
# ==================================================
from .common import obj, prop, ref

ERROR_TYPES = [
    "AUTHENTICATION",
    "AUTHORIZATION",
    "VALIDATION",
    "RATE_LIMIT",
    "TWITTER_API",
    "TWITTER_REQUEST",
    "TWITTER_PARTIAL_RESPONSE",
    "INTERNAL",
]


def get() -> dict:
    """ResponseMeta, ErrorResponse, Media and PostContent."""
    rate_limit = obj({
        "remaining": prop("number", "Number of requests remaining in the current window"),
        "limit": prop("number", "Total number of requests allowed in the window"),
        "reset": prop("number", "Timestamp when the rate limit resets (in seconds since epoch)"),
    })
    pagination = obj({
        "page": prop("number", "Current page number"),
        "perPage": prop("number", "Number of items per page"),
        "total": prop("number", "Total number of items"),
        "totalPages": prop("number", "Total number of pages"),
        "nextCursor": prop("string", "Next page cursor (if applicable)"),
        "prevCursor": prop("string", "Previous page cursor (if applicable)"),
    })
    error = obj({
        "type": prop("string", "Error type", enum=ERROR_TYPES),
        "message": prop("string", "Error message"),
        "code": prop("string", "Error code (if applicable)"),
        "details": prop("object", "Additional error details", additionalProperties=True),
    }, required=["type", "message"])
    return {
        "ResponseMeta": obj({"rateLimit": rate_limit, "pagination": pagination}),
        "ErrorResponse": obj({"error": error}, required=["error"]),
        "Media": obj({
            "id": prop("string", "Media ID"),
            "data": prop("string", "Base64 encoded media data (for upload only)"),
            "mimeType": prop("string", "Media MIME type"),
            "altText": prop("string", "Alternative text for accessibility"),
        }),
        "PostContent": obj({
            "text": prop("string", "Post text content"),
            "media": prop("array", "Media attachments", items=ref("Media")),
        }),
    }
