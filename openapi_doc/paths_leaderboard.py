# ==================================================
# openapi_doc/paths_leaderboard.py: leaderboard + activity
# ==================================================
from .common import error_responses, path_param, query_param, response, security

TIME_PERIODS = ["all", "year", "month", "week", "day"]


def _paging(noun: str):
    return [
        query_param("limit", f"Maximum number of {noun} to return",
                    type="integer", default=10, minimum=1, maximum=100),
        query_param("offset", f"Number of {noun} to skip",
                    type="integer", default=0, minimum=0),
    ]


def _platform_filter():
    return query_param("platform", "Platform name for filtering")


def _signer():
    return path_param("signerId", "NEAR account ID")


def _op(op_id, summary, description, parameters, ok, ok_schema, *errors, not_found=None):
    out = {"200": response(ok, ok_schema)}
    out.update(error_responses(*errors, not_found=not_found or "Not found",
                               schema="LeaderboardErrorResponse"))
    return {
        "summary": summary,
        "description": description,
        "operationId": op_id,
        "tags": ["Leaderboard"],
        "security": security("nearSignature"),
        "parameters": parameters,
        "responses": out,
    }


def get() -> dict:
    timeframe = query_param("timeframe", "Time period for filtering",
                            enum=TIME_PERIODS, default="all")
    return {
        "/api/leaderboard": {
            "get": _op("getLeaderboard", "Get NEAR account posting leaderboard",
                       "Returns a leaderboard of NEAR accounts ranked by post count",
                       _paging("entries") + [timeframe, _platform_filter()],
                       "Leaderboard data", "LeaderboardResponse", "500"),
        },
        "/api/activity/{signerId}": {
            "get": _op("getAccountActivity", "Get account activity",
                       "Returns activity data for a specific NEAR account",
                       [_signer(), _platform_filter()],
                       "Account activity data", "AccountActivityResponse", "404", "500",
                       not_found="Account activity not found"),
        },
        "/api/activity/{signerId}/posts": {
            "get": _op("getAccountPosts", "Get account posts",
                       "Returns post records for a specific NEAR account",
                       [_signer(), _platform_filter()] + _paging("posts"),
                       "Account posts data", "AccountPostsResponse", "500"),
        },
    }
