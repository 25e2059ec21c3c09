"""MCP tool definitions mirroring the command boundary."""

# pyright: reportUnusedFunction=false
# All functions are registered via @mcp.tool decorator

from __future__ import annotations

import asyncio
import json
import logging

from fastmcp import FastMCP

from folio.browser.errors import DirectoryReadFailed
from folio.commands import get_parent_path as _parent_of
from folio.commands import list_files as _list_files

logger = logging.getLogger(__name__)


def register_tools(mcp: FastMCP) -> None:
    """Register the two browsing tools."""

    @mcp.tool()
    async def list_files(path: str = "") -> str:
        """List a directory's visible entries, directories first.

        Leave ``path`` empty for the user's home directory.
        Returns a JSON array of {name, path, is_dir, size}, or
        an error message if the directory cannot be read.
        """
        from folio.mcp.server import get_lister

        lister = get_lister()
        try:
            entries = await asyncio.to_thread(
                _list_files, path or None, lister
            )
        except DirectoryReadFailed as exc:
            logger.info("event=mcp_list_failed error=%s", exc)
            return str(exc)
        return json.dumps([e.to_dict() for e in entries])

    @mcp.tool()
    async def get_parent_path(path: str) -> str:
        """Parent directory of ``path`` for "go up" navigation.

        Returns JSON {"parent": <path or null>}; null means the
        path is a root and has no parent.
        """
        return json.dumps({"parent": _parent_of(path)})
