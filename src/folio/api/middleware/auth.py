"""Optional API key authentication middleware."""

from __future__ import annotations

import hmac
import logging

from fastapi import Request, Response
from starlette.middleware.base import (
    BaseHTTPMiddleware,
    RequestResponseEndpoint,
)
from starlette.responses import JSONResponse

from folio.api.schemas import APIResponse
from folio.constants import (
    API_KEY_HEADER,
    AUTH_EXEMPT_METHODS,
    AUTH_EXEMPT_PATHS,
    AUTH_EXEMPT_PREFIXES,
)

logger = logging.getLogger(__name__)


def is_exempt(method: str, path: str) -> bool:
    """Public reads: health and API docs, GET/HEAD only."""
    if method not in AUTH_EXEMPT_METHODS:
        return False
    return path in AUTH_EXEMPT_PATHS or path.startswith(
        AUTH_EXEMPT_PREFIXES
    )


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Require ``X-API-Key`` on browsing routes when a key is set.

    With ``Settings.api_key`` empty the whole API is open, which
    suits a shell talking to a loopback server. Listing a
    directory exposes file names, so once a key is configured
    every route except the public reads needs it.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        settings = request.app.state.settings
        if not settings.api_key:
            return await call_next(request)

        path = request.url.path
        if is_exempt(request.method, path):
            return await call_next(request)

        provided = request.headers.get(API_KEY_HEADER, "")
        if hmac.compare_digest(provided, settings.api_key):
            return await call_next(request)

        logger.warning(
            "event=auth_rejected method=%s path=%s has_key=%s",
            request.method,
            path,
            bool(provided),
        )
        body = APIResponse(
            success=False,
            error="Invalid or missing API key",
        )
        return JSONResponse(
            status_code=401, content=body.model_dump()
        )
