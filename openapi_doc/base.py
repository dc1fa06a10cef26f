# ==============================================
# openapi_doc/base.py: static document metadata
# ==============================================
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, NamedTuple, Optional, Tuple


class Server(NamedTuple):
    url: str
    description: Optional[str] = None


class Tag(NamedTuple):
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class DocumentMeta:
    """Everything in the root document that is not a path or a schema."""

    title: str
    version: str
    description: str = ""
    openapi: str = "3.0.3"
    contact: Optional[Mapping[str, str]] = None
    license: Optional[Mapping[str, str]] = None
    servers: Tuple[Server, ...] = ()
    tags: Tuple[Tag, ...] = ()
    security_schemes: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    security: Tuple[Mapping[str, Tuple[str, ...]], ...] = ()

    def with_servers(self, *servers: Server) -> "DocumentMeta":
        return replace(self, servers=tuple(servers))


BASE_META = DocumentMeta(
    title="Twitter API Proxy",
    description=(
        "A secure proxy for the Twitter API that allows authorized frontends to perform "
        "Twitter actions on behalf of users who have granted permission."
    ),
    version="1.0.0",
    contact={"name": "API Support", "email": "support@example.com"},
    license={"name": "MIT", "url": "https://opensource.org/licenses/MIT"},
    servers=(
        Server("https://api.example.com/v1", "Production server"),
        Server("https://staging-api.example.com/v1", "Staging server"),
        Server("http://localhost:8787", "Local development server"),
    ),
    tags=(
        Tag("auth", "Authentication operations"),
        Tag("posts", "Post operations (tweets, retweets, etc.)"),
        Tag("media", "Media operations (upload, status, etc.)"),
        Tag("rate-limits", "Rate limit operations"),
        Tag("Leaderboard", "NEAR account activity and posting leaderboard"),
    ),
    # Header names match what the proxy middleware reads
    security_schemes={
        "apiKey": {
            "type": "apiKey",
            "in": "header",
            "name": "X-API-Key",
            "description": "API key issued to an authorized frontend origin",
        },
        "userId": {
            "type": "apiKey",
            "in": "header",
            "name": "X-User-ID",
            "description": "Platform user ID the request acts on behalf of",
        },
        "nearSignature": {
            "type": "http",
            "scheme": "bearer",
            "description": "Signed NEAR message passed as a bearer token",
        },
    },
    security=({"apiKey": ()},),
)
