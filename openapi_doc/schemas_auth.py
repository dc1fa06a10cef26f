# ==================================================
# openapi_doc/schemas_auth.py
# ==================================================
from .common import envelope, obj, prop


def get() -> dict:
    tokens = obj({
        "accessToken": prop("string", "The access token"),
        "refreshToken": prop("string", "The refresh token"),
        "expiresAt": prop("number", "The timestamp when the access token expires"),
    }, required=["accessToken", "refreshToken"])
    return {
        # requests
        "InitializeAuthRequest": obj({
            "redirectUri": prop("string", "The URI to redirect to after authentication", format="uri"),
            "scopes": prop("array", "The OAuth scopes to request", items={"type": "string"}),
            "state": prop("string", "Optional state parameter for CSRF protection"),
        }, required=["redirectUri"]),
        "AuthCallbackRequest": obj({
            "code": prop("string", "The authorization code from the OAuth callback"),
            "state": prop("string", "The state parameter from the callback"),
            "savedState": prop("string", "The state parameter saved during initialization"),
            "redirectUri": prop("string", "The redirect URI used in the initial request", format="uri"),
            "codeVerifier": prop("string", "The PKCE code verifier (if PKCE was used)"),
        }, required=["code", "state", "savedState", "redirectUri"]),
        # responses
        "InitializeAuthResponse": envelope(obj({
            "authUrl": prop("string", "The authentication URL to redirect the user to", format="uri"),
            "state": prop("string", "The state parameter for CSRF protection"),
            "codeVerifier": prop("string", "The PKCE code verifier (if PKCE is used)"),
        }, required=["authUrl", "state"])),
        "AuthCallbackResponse": envelope(obj({
            "userId": prop("string", "The user ID to use for subsequent requests"),
            "tokens": tokens,
        }, required=["userId", "tokens"])),
        "RefreshTokenResponse": envelope(obj({
            "accessToken": prop("string", "The new access token"),
            "refreshToken": prop("string", "The new refresh token"),
            "expiresAt": prop("number", "The timestamp when the access token expires"),
        }, required=["accessToken", "refreshToken"])),
        "RevokeTokenResponse": envelope(obj({
            "success": prop("boolean", "Whether the token was successfully revoked"),
        }, required=["success"])),
        "ValidateTokensResponse": envelope(obj({
            "hasTokens": prop("boolean", "Whether the user has valid tokens"),
        }, required=["hasTokens"])),
    }
