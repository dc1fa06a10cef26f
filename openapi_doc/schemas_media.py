# ==================================================
# openapi_doc/schemas_media.py
# ==================================================
from .common import envelope, obj, prop, success_envelope

UPLOAD_STATES = ["pending", "in_progress", "succeeded", "failed"]
PROCESSING_STATES = ["pending", "in_progress", "completed", "failed"]


def _status_data() -> dict:
    processing = obj({
        "state": prop("string", "Processing state", enum=PROCESSING_STATES),
        "progressPercent": prop("number", "Processing progress percentage"),
        "error": obj({
            "code": prop("string", "Error code"),
            "message": prop("string", "Error message"),
        }),
    })
    return obj({
        "mediaId": prop("string", "Media ID"),
        "status": prop("string", "Media upload status", enum=UPLOAD_STATES),
        "expiresAfter": prop("number", "Timestamp when the media expires (in seconds since epoch)"),
        "processingInfo": processing,
    }, required=["mediaId", "status"])


def get() -> dict:
    alt_text = prop("string", "Alternative text for accessibility")
    metadata_ack = success_envelope("metadata was successfully updated", "mediaId", "Media ID")
    metadata_ack["properties"]["data"]["properties"]["altText"] = prop("string", "Updated alternative text")
    return {
        "MediaUploadJsonRequest": obj({
            "data": prop("string", "Base64 encoded media data", format="byte"),
            "mimeType": prop("string", "Media MIME type", example="image/jpeg"),
            "altText": alt_text,
        }, required=["data", "mimeType"]),
        "MediaUploadFormRequest": obj({
            "media": prop("string", "Media file", format="binary"),
            "mimeType": prop("string", "Media MIME type (optional, will be detected from file)"),
            "altText": alt_text,
        }, required=["media"]),
        "MediaMetadataUpdateRequest": obj({"altText": alt_text}, required=["altText"]),
        "MediaUploadResponse": envelope(_status_data()),
        "MediaStatusResponse": envelope(_status_data()),
        "MediaMetadataUpdateResponse": metadata_ack,
    }
