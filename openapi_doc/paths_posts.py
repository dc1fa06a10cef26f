# ==================================================
# openapi_doc/paths_posts.py: /api/post/* actions
# ==================================================
from .common import json_content, path_param, ref, json_body, responses, security

_ERRORS = ("400", "401", "403", "429", "500")
_ERRORS_404 = ("400", "401", "403", "404", "429", "500")


def _post_id():
    return path_param("id", "Post ID")


def _single_or_thread(single: str, item: str, description: str) -> dict:
    """Body that is either one request object or an array of thread items."""
    return {
        "required": True,
        "content": json_content({
            "oneOf": [
                ref(single),
                {"type": "array", "items": ref(item), "description": description},
            ]
        }),
    }


def _op(op_id: str, summary: str, description: str, ok: str, ok_schema: str,
        errors=_ERRORS_404, **extra) -> dict:
    op = {
        "tags": ["posts"],
        "summary": summary,
        "description": description,
        "operationId": op_id,
    }
    op.update(extra)
    op["responses"] = responses(ok, ok_schema, *errors, not_found="Post not found")
    op["security"] = security("nearSignature")
    return op


def get() -> dict:
    return {
        "/api/post": {
            "post": _op("createPost", "Create a post", "Create a new post (tweet)",
                        "Post created successfully", "PostResponse", errors=_ERRORS,
                        requestBody=json_body("CreatePostRequest")),
        },
        "/api/post/{id}": {
            "delete": _op("deletePost", "Delete a post", "Delete an existing post",
                          "Post deleted successfully", "DeletePostResponse",
                          parameters=[_post_id()]),
        },
        "/api/post/repost": {
            "post": _op("repost", "Repost", "Repost/retweet an existing post",
                        "Repost successful", "RepostResponse",
                        requestBody=json_body("RepostRequest")),
        },
        "/api/post/quote": {
            "post": _op("quotePost", "Quote post", "Quote an existing post",
                        "Quote post successful", "QuotePostResponse",
                        requestBody=_single_or_thread("QuotePostRequest", "QuotePostThreadItem",
                                                      "Thread of quote posts")),
        },
        "/api/post/reply": {
            "post": _op("replyToPost", "Reply to post", "Reply to an existing post",
                        "Reply successful", "ReplyToPostResponse",
                        requestBody=_single_or_thread("ReplyToPostRequest", "ReplyToPostThreadItem",
                                                      "Thread of replies")),
        },
        "/api/post/like/{id}": {
            "post": _op("likePost", "Like a post", "Like an existing post",
                        "Post liked successfully", "LikePostResponse",
                        parameters=[_post_id()]),
            "delete": _op("unlikePost", "Unlike a post", "Unlike a previously liked post",
                          "Post unliked successfully", "UnlikePostResponse",
                          parameters=[_post_id()]),
        },
    }
