# ==================================================
# openapi_doc/schemas_posts.py
# ==================================================
from .common import envelope, obj, prop, ref, success_envelope


def _media(description: str) -> dict:
    return prop("array", description, items=ref("Media"))


def _target_request(verb: str, noun: str, required: bool) -> dict:
    post_id = f"ID of the post to {verb}"
    if not required:
        post_id += " (required for the first item in the thread)"
    return obj({
        "postId": prop("string", post_id),
        "text": prop("string", f"Text content for the {noun}"),
        "media": _media(f"Media attachments for the {noun}"),
    }, required=["postId"] if required else None)


def _one_or_thread() -> dict:
    return envelope({
        "oneOf": [
            ref("Post"),
            {"type": "array", "items": ref("Post"), "description": "Array of posts (for threads)"},
        ]
    })


def get() -> dict:
    return {
        # requests
        "PostTarget": obj({
            "platform": prop("string", "The platform to post to", enum=["twitter"]),
            "userId": prop("string", "The user ID on the platform"),
        }, required=["platform", "userId"]),
        "CreatePostRequest": obj({
            "targets": prop("array", "Array of targets to post to (can be a single target)",
                            items=ref("PostTarget")),
            "content": prop("array", "The content of the post, one entry per post in a thread",
                            items=ref("PostContent")),
        }, required=["targets", "content"]),
        "RepostRequest": obj({
            "postId": prop("string", "ID of the post to repost"),
        }, required=["postId"]),
        "QuotePostRequest": _target_request("quote", "quote post", required=True),
        "QuotePostThreadItem": _target_request("quote", "quote post", required=False),
        "ReplyToPostRequest": _target_request("reply to", "reply", required=True),
        "ReplyToPostThreadItem": _target_request("reply to", "reply", required=False),
        # responses
        "Post": obj({
            "id": prop("string", "Post ID"),
            "text": prop("string", "Post text content"),
            "createdAt": prop("string", "Post creation timestamp", format="date-time"),
            "authorId": prop("string", "ID of the post author"),
            "media": _media("Media attachments"),
            "metrics": obj({
                "retweets": prop("number", "Number of retweets"),
                "quotes": prop("number", "Number of quote tweets"),
                "likes": prop("number", "Number of likes"),
                "replies": prop("number", "Number of replies"),
            }),
            "inReplyToId": prop("string", "ID of the post this is a reply to (if applicable)"),
            "quotedPostId": prop("string", "ID of the post this is quoting (if applicable)"),
        }),
        "PostResponse": _one_or_thread(),
        "DeletePostResponse": success_envelope("post was successfully deleted", "id", "ID of the deleted post"),
        "RepostResponse": envelope(ref("Post")),
        "QuotePostResponse": _one_or_thread(),
        "ReplyToPostResponse": _one_or_thread(),
        "LikePostResponse": success_envelope("post was successfully liked", "id", "ID of the liked post"),
        "UnlikePostResponse": success_envelope("post was successfully unliked", "id", "ID of the unliked post"),
    }
