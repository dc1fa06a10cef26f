# ==================================================
# openapi_doc/paths_auth.py: /auth/* OAuth flow
# ==================================================
from .common import (
    error_responses, json_body, json_content, platform_param, query_param, responses, security,
)

_ERRORS = ("400", "401", "500")


def _connected_accounts_schema() -> dict:
    account = {
        "type": "object",
        "properties": {
            "platform": {"type": "string", "description": "The social media platform"},
            "userId": {"type": "string", "description": "The user ID on the platform"},
            "username": {"type": "string", "description": "The username on the platform"},
        },
    }
    return {
        "type": "object",
        "properties": {
            "data": {
                "type": "object",
                "properties": {"accounts": {"type": "array", "items": account}},
            }
        },
    }


def get() -> dict:
    """OAuth login/callback/refresh/revoke/status plus the connected-accounts listing."""
    accounts = {
        "200": {
            "description": "Connected accounts retrieved successfully",
            "content": json_content(_connected_accounts_schema()),
        },
        **error_responses("401", "500"),
    }
    return {
        "/auth/{platform}/login": {
            "post": {
                "tags": ["auth"],
                "summary": "Initialize authentication",
                "description": "Start the OAuth flow by generating an authentication URL for a specific platform",
                "operationId": "initializeAuth",
                "parameters": [platform_param("The social media platform to authenticate with")],
                "requestBody": json_body("InitializeAuthRequest"),
                "responses": responses("Authentication URL generated successfully",
                                       "InitializeAuthResponse", *_ERRORS),
                "security": security("apiKey"),
            }
        },
        "/auth/{platform}/callback": {
            "get": {
                "tags": ["auth"],
                "summary": "Handle OAuth callback",
                "description": "Process the OAuth callback and exchange the code for tokens for a specific platform",
                "operationId": "handleCallback",
                "parameters": [
                    platform_param("The social media platform handling the callback"),
                    query_param("code", "The authorization code from the OAuth provider", required=True),
                    query_param("state", "The state parameter for CSRF protection", required=True),
                ],
                "responses": responses("Authentication successful", "AuthCallbackResponse", *_ERRORS),
                "security": security("apiKey"),
            }
        },
        "/auth/{platform}/refresh": {
            "post": {
                "tags": ["auth"],
                "summary": "Refresh token",
                "description": "Refresh an access token for a specific platform",
                "operationId": "refreshToken",
                "parameters": [platform_param("The social media platform to refresh the token for")],
                "responses": responses("Token refreshed successfully", "RefreshTokenResponse", *_ERRORS),
                "security": security("apiKey", "userId"),
            }
        },
        "/auth/{platform}/revoke": {
            "delete": {
                "tags": ["auth"],
                "summary": "Revoke token",
                "description": "Revoke a user's tokens for a specific platform",
                "operationId": "revokeToken",
                "parameters": [platform_param("The social media platform to revoke the token for")],
                "responses": responses("Token revoked successfully", "RevokeTokenResponse", *_ERRORS),
                "security": security("apiKey", "userId"),
            }
        },
        "/auth/{platform}/status": {
            "get": {
                "tags": ["auth"],
                "summary": "Check token status",
                "description": "Check if a user has valid tokens for a specific platform",
                "operationId": "hasValidTokens",
                "parameters": [
                    platform_param("The social media platform to check token status for"),
                    query_param("userId", "The user ID on the platform", required=True),
                ],
                "responses": responses("Token validation result", "ValidateTokensResponse", *_ERRORS),
                "security": security("apiKey", "userId"),
            }
        },
        "/auth/accounts": {
            "get": {
                "tags": ["auth"],
                "summary": "List connected accounts",
                "description": "List all social media accounts connected to a NEAR wallet",
                "operationId": "listConnectedAccounts",
                "responses": accounts,
                "security": security("apiKey"),
            }
        },
    }
