# ==================================================
# openapi_doc/paths_media.py: /api/media/* uploads
# ==================================================
from .common import json_content, path_param, ref, json_body, responses, security


def get() -> dict:
    """Upload, status polling and alt-text updates for media attachments."""
    media_id = path_param("id", "Media ID")
    upload_body = {
        "required": True,
        "content": {
            **json_content(ref("MediaUploadJsonRequest")),
            "multipart/form-data": {"schema": ref("MediaUploadFormRequest")},
        },
    }
    return {
        "/api/media": {
            "post": {
                "tags": ["media"],
                "summary": "Upload media",
                "description": "Upload media for use in posts",
                "operationId": "uploadMedia",
                "requestBody": upload_body,
                "responses": responses("Media uploaded successfully", "MediaUploadResponse",
                                       "400", "401", "403", "413", "415", "429", "500"),
                "security": security("nearSignature"),
            }
        },
        "/api/media/{id}/status": {
            "get": {
                "tags": ["media"],
                "summary": "Get media status",
                "description": "Get the status of a media upload",
                "operationId": "getMediaStatus",
                "parameters": [media_id],
                "responses": responses("Media status retrieved successfully", "MediaStatusResponse",
                                       "400", "401", "403", "404", "429", "500",
                                       not_found="Media not found"),
                "security": security("nearSignature"),
            }
        },
        "/api/media/{id}/metadata": {
            "put": {
                "tags": ["media"],
                "summary": "Update media metadata",
                "description": "Update metadata for a media upload (e.g., alt text)",
                "operationId": "updateMediaMetadata",
                "parameters": [media_id],
                "requestBody": json_body("MediaMetadataUpdateRequest"),
                "responses": responses("Media metadata updated successfully",
                                       "MediaMetadataUpdateResponse",
                                       "400", "401", "403", "404", "429", "500",
                                       not_found="Media not found"),
                "security": security("nearSignature"),
            }
        },
    }
