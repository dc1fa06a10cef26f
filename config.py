# config.py: environment-driven settings for the docs service and export job

import logging
import logging.config
import os
import sys
from typing import Optional

from openapi_doc.base import BASE_META, DocumentMeta, Server


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# --- Environment-driven configuration ---
# Replaces the static server list with a single deployment URL when set.
OPENAPI_SERVER_URL = os.getenv("OPENAPI_SERVER_URL")
# Rewrite `servers` to the URL the document was requested from.
OPENAPI_INJECT_REQUEST_SERVER = _flag("OPENAPI_INJECT_REQUEST_SERVER", False)
OPENAPI_INCLUDE_LEADERBOARD = _flag("OPENAPI_INCLUDE_LEADERBOARD", True)
OPENAPI_OUTPUT_DIR = os.getenv("OPENAPI_OUTPUT_DIR", ".")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def default_meta() -> DocumentMeta:
    if OPENAPI_SERVER_URL:
        return BASE_META.with_servers(Server(OPENAPI_SERVER_URL.rstrip("/"), "Configured server"))
    return BASE_META


def configure_logging(level: Optional[str] = None) -> None:
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "stream": sys.stderr,
            },
        },
        "root": {"handlers": ["console"], "level": (level or LOG_LEVEL).upper()},
    })


# --- Response wrapper ---
def wrap(data=None, error=None, error_type="INTERNAL"):
    """
    Envelope shared by the docs endpoints.
    Errors follow the ErrorResponse schema the document itself publishes.
    """
    if error:
        return {"error": {"type": error_type, "message": str(error)}}
    return {"data": data}
