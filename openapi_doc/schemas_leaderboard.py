# ==================================================
# openapi_doc/schemas_leaderboard.py
# ==================================================
from .common import obj, prop, ref
from .paths_leaderboard import TIME_PERIODS


def _activity(*extra: str) -> dict:
    fields = {
        "signerId": prop("string", "NEAR account ID"),
        "postCount": prop("number", "Number of posts"),
    }
    if "first" in extra:
        fields["firstPostTimestamp"] = prop("number", "Timestamp of the first post")
    fields["lastPostTimestamp"] = prop("number", "Timestamp of the last post")
    if "platform" in extra:
        fields["platform"] = prop("string", "Platform name")
    return obj(fields, required=list(fields))


def _data(data: dict) -> dict:
    # leaderboard responses carry no ResponseMeta
    return obj({"data": data}, required=["data"])


def get() -> dict:
    platform_filter = prop("string", "Platform name for filtering (if specified)")
    return {
        "LeaderboardEntry": _activity(),
        "PlatformLeaderboardEntry": _activity("platform"),
        "Pagination": obj({
            "total": prop("number", "Total number of entries"),
            "limit": prop("number", "Maximum number of entries per page"),
            "offset": prop("number", "Number of entries to skip"),
        }, required=["total", "limit", "offset"]),
        "PostRecord": obj({
            "postId": prop("string", "Post ID"),
            "platform": prop("string", "Platform name"),
            "timestamp": prop("string", "Timestamp of the post", format="date-time"),
            "userId": prop("string", "User ID on the platform"),
        }, required=["postId", "platform", "timestamp", "userId"]),
        "AccountActivity": _activity("first"),
        "PlatformAccountActivity": _activity("first", "platform"),
        "LeaderboardResponse": _data(obj({
            "entries": prop("array", "Leaderboard entries", items=ref("LeaderboardEntry")),
            "pagination": {**ref("Pagination"), "description": "Pagination information"},
            "timeframe": prop("string", "Time period for filtering", enum=TIME_PERIODS),
            "platform": platform_filter,
        }, required=["entries", "pagination", "timeframe"])),
        "AccountActivityResponse": _data({
            "oneOf": [ref("AccountActivity"), ref("PlatformAccountActivity")],
            "description": "Account activity data",
        }),
        "AccountPostsResponse": _data(obj({
            "posts": prop("array", "Post records", items=ref("PostRecord")),
            "pagination": obj({
                "limit": prop("number", "Maximum number of posts per page"),
                "offset": prop("number", "Number of posts to skip"),
            }, required=["limit", "offset"], description="Pagination information"),
            "platform": platform_filter,
        }, required=["posts", "pagination"])),
        "LeaderboardErrorResponse": obj({
            "error": obj({
                "type": prop("string", "Error type"),
                "message": prop("string", "Error message"),
                "status": prop("number", "HTTP status code"),
            }, required=["type", "message", "status"]),
        }, required=["error"]),
    }
