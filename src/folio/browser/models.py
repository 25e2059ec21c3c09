"""Frozen entry type shared by the lister and every adapter.

A listing is a snapshot: entries are built once per call, never
mutated, and never cached between calls.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate child of a listed directory.

    ``size`` comes straight from the entry's metadata. For
    directories it is whatever the platform reports, not the
    size of the directory's contents.
    """

    name: str
    path: str
    is_dir: bool
    size: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DirectoryListing:
    """Entries of one directory plus the directory actually read."""

    directory: str
    entries: tuple[DirectoryEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)
