"""Directory listing and parent-path endpoints for the file browser.

Route functions are sync on purpose: FastAPI runs them in its
threadpool, so a slow directory read never blocks the event loop.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from folio.api.dependencies import get_lister
from folio.api.schemas import APIResponse, FileEntry, ParentPath
from folio.browser.errors import DirectoryReadFailed
from folio.browser.lister import DirectoryLister
from folio.commands import browse, get_parent_path

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/files", tags=["files"])


@router.get("")
def list_files(
    path: str | None = None,
    lister: DirectoryLister = Depends(get_lister),
) -> APIResponse:
    """List a directory. No path (or "") lists the default location."""
    try:
        listing = browse(path, lister)
    except DirectoryReadFailed as exc:
        return APIResponse(success=False, data=None, error=str(exc))

    return APIResponse(
        success=True,
        data=[FileEntry.from_entry(e) for e in listing.entries],
        metadata={
            "directory": listing.directory,
            "count": len(listing),
        },
    )


@router.get("/parent")
def parent(path: str = Query(...)) -> APIResponse:
    """Parent of ``path``; ``data.parent`` is null at a root."""
    return APIResponse(
        success=True,
        data=ParentPath(parent=get_parent_path(path)),
    )
