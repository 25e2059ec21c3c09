"""FastAPI application with lifespan startup."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

# Phase 1: Singleton logging — before the app and its routes load
from folio.logging_config import setup_logging

setup_logging()

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from folio import __version__  # noqa: E402
from folio.api.middleware.auth import ApiKeyMiddleware  # noqa: E402
from folio.api.routes import files, health  # noqa: E402
from folio.config import Settings  # noqa: E402
from folio.logging_config import (  # noqa: E402
    cleanup_third_party_handlers,
)

# Phase 2: clear duplicate third-party handlers after all imports
cleanup_third_party_handlers()

_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = _settings
    logging.getLogger().setLevel(settings.effective_log_level)
    app.state.settings = settings

    if not settings.api_key:
        _logger.warning(
            "event=no_api_key action=all_endpoints_public"
        )
    _logger.info(
        "event=startup default_directory=%s",
        settings.default_directory or "~",
    )

    yield


app = FastAPI(
    title="Folio",
    description="Directory listing backend for file-browser shells",
    version=__version__,
    openapi_url="/api/openapi.json",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

# Middleware stack (Starlette LIFO: last added = outermost = runs first)
#
# Inbound request order:
#   CORSMiddleware (outermost) -> ApiKeyMiddleware -> Router
#
# CORS must be outermost so OPTIONS preflight is answered before
# ApiKeyMiddleware rejects for missing X-API-Key.
_settings = Settings()
app.state.settings = _settings

app.add_middleware(ApiKeyMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origin_list,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "X-API-Key"],
    allow_credentials=False,
)

app.include_router(health.router)
app.include_router(files.router)
