"""Command boundary called by every adapter (HTTP, MCP, CLI).

Each call builds its result from scratch. Nothing is cached, so
the functions are safe to call from any thread.
"""

from __future__ import annotations

from folio.browser.lister import DirectoryLister, display_text
from folio.browser.models import DirectoryEntry, DirectoryListing
from folio.browser.navigator import parent_path


def list_files(
    path: str | None = None,
    lister: DirectoryLister | None = None,
) -> list[DirectoryEntry]:
    """Sorted visible entries of ``path``; None or "" means default.

    Raises:
        DirectoryReadFailed: the directory cannot be read.
    """
    return (lister or DirectoryLister()).list_directory(path)


def browse(
    path: str | None = None,
    lister: DirectoryLister | None = None,
) -> DirectoryListing:
    """Like ``list_files`` but also reports which directory was read."""
    lister = lister or DirectoryLister()
    directory = lister.resolve(path)
    entries = lister.read_directory(directory)
    return DirectoryListing(
        directory=display_text(str(directory)),
        entries=tuple(entries),
    )


def get_parent_path(path: str) -> str | None:
    """Parent of ``path``; None when there is none. Never raises."""
    return parent_path(path)
