"""
API key guard for mutating routes.

Create, update and delete requests must carry the shared secret from
``settings.api_key`` in the ``x-api-key`` header.  Read‑only routes are
public.  The comparison is exact (case‑sensitive) and uses
``hmac.compare_digest`` so that the time taken does not depend on how
many leading characters match.
"""

import hmac
from typing import Optional

from fastapi import Header, Request

from .config import Settings
from .errors import AuthError

INVALID_API_KEY = "Unauthorized - Invalid API key"


def check_api_key(provided: Optional[str], expected: str) -> None:
    """Raise ``AuthError`` unless ``provided`` equals ``expected``."""
    if provided is None:
        raise AuthError(INVALID_API_KEY)
    if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        raise AuthError(INVALID_API_KEY)


def require_api_key(
    request: Request,
    x_api_key: Optional[str] = Header(None, alias="x-api-key"),
) -> None:
    """Dependency that enforces the ``x-api-key`` header.

    The expected key is taken from the settings the application was
    created with (``app.state.settings``).
    """
    app_settings: Settings = request.app.state.settings
    check_api_key(x_api_key, app_settings.api_key)
