"""Directory listing: read, filter, classify, sort.

One call is one snapshot. The directory handle is opened and
closed inside ``read_directory`` and nothing is kept afterwards,
so a single lister can serve concurrent callers.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path

from folio.browser.errors import DirectoryReadFailed
from folio.browser.locations import (
    HomeLocationProvider,
    LocationProvider,
)
from folio.browser.models import DirectoryEntry
from folio.constants import HIDDEN_PREFIX

logger = logging.getLogger(__name__)


def entry_sort_key(entry: DirectoryEntry) -> tuple[bool, str, str]:
    """Directories first, then case-insensitive name.

    The raw name is the last key so names differing only in case
    still come out in one reproducible order (uppercase first).
    """
    return (not entry.is_dir, entry.name.casefold(), entry.name)


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def display_text(text: str) -> str:
    """Lossy display form of an OS string.

    Undecodable bytes (kept by Python as surrogate escapes) become
    U+FFFD instead of breaking JSON encoding downstream.
    """
    return os.fsencode(text).decode("utf-8", errors="replace")


class DirectoryLister:
    """Lists the immediate, visible children of a directory."""

    def __init__(
        self, locations: LocationProvider | None = None
    ) -> None:
        self._locations = locations or HomeLocationProvider()

    def resolve(self, path: str | None) -> Path:
        """Target directory for ``path``; empty or None means default."""
        if path:
            return Path(path)
        return self._locations.default()

    def list_directory(
        self, path: str | None = None
    ) -> list[DirectoryEntry]:
        """Sorted entries of ``path`` (or the default location).

        Raises:
            DirectoryReadFailed: ``path`` is missing, not a
                directory, or cannot be opened.
        """
        return self.read_directory(self.resolve(path))

    def read_directory(self, directory: Path) -> list[DirectoryEntry]:
        try:
            scanner = os.scandir(directory)
        except OSError as exc:
            logger.info(
                "event=directory_read_failed errno=%s", exc.errno
            )
            raise DirectoryReadFailed(str(directory), exc) from exc

        with scanner:
            entries = list(_scan(scanner))

        entries.sort(key=entry_sort_key)
        logger.debug(
            "event=directory_listed directory=%s count=%d",
            directory,
            len(entries),
        )
        return entries


def _scan(scanner: Iterator[os.DirEntry[str]]) -> Iterator[DirectoryEntry]:
    """Yield visible entries, dropping any child that fails.

    An error from the enumeration itself ends the scan; whatever
    was gathered so far is still returned.
    """
    while True:
        try:
            child = next(scanner)
        except StopIteration:
            return
        except OSError as exc:
            logger.debug("event=scan_interrupted error=%s", exc)
            return

        if not child.name or is_hidden(child.name):
            continue

        entry = _to_entry(child)
        if entry is not None:
            yield entry


def _to_entry(child: os.DirEntry[str]) -> DirectoryEntry | None:
    # Symlinks are not followed: a link to a directory lists as a file
    try:
        info = child.stat(follow_symlinks=False)
    except OSError as exc:
        logger.debug(
            "event=entry_skipped name=%r error=%s", child.name, exc
        )
        return None

    return DirectoryEntry(
        name=display_text(child.name),
        path=display_text(child.path),
        is_dir=stat.S_ISDIR(info.st_mode),
        size=info.st_size,
    )
