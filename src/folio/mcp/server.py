"""MCP server: FastMCP instance with configure/run helpers."""

from __future__ import annotations

from fastmcp import FastMCP

from folio import __version__
from folio.browser.lister import DirectoryLister
from folio.mcp.tools import register_tools

mcp = FastMCP(
    name="folio",
    version=__version__,
    instructions=(
        "File browser backend — list directories and "
        "navigate to parent paths"
    ),
)

_lister: DirectoryLister | None = None

register_tools(mcp)


def configure(lister: DirectoryLister) -> None:
    """Set the lister used by the MCP tools.

    Must be called before serving requests.
    """
    global _lister  # noqa: PLW0603
    _lister = lister


def get_lister() -> DirectoryLister:
    """Get the configured lister."""
    if _lister is None:
        msg = (
            "MCP server not configured. "
            "Call configure(lister) first."
        )
        raise RuntimeError(msg)
    return _lister
