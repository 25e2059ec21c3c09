"""FastAPI dependency injection for the browsing core."""

from __future__ import annotations

from fastapi import Request

from folio.browser.lister import DirectoryLister
from folio.config import Settings


def get_lister(request: Request) -> DirectoryLister:
    """Lister bound to the configured default location.

    Built per request from current settings; the lister holds no
    state beyond its location provider.
    """
    settings: Settings = request.app.state.settings
    return DirectoryLister(settings.location_provider())
