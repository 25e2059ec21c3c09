"""Request/response schemas for the HTTP API."""

from typing import Any

from pydantic import BaseModel, Field

from folio.browser.models import DirectoryEntry


class APIResponse(BaseModel):
    """Standard response envelope for all API endpoints."""

    success: bool
    data: Any | None = None
    error: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class FileEntry(BaseModel):
    """One directory entry as sent to the browser shell."""

    name: str
    path: str
    is_dir: bool
    size: int

    @classmethod
    def from_entry(cls, entry: DirectoryEntry) -> "FileEntry":
        return cls(
            name=entry.name,
            path=entry.path,
            is_dir=entry.is_dir,
            size=entry.size,
        )


class ParentPath(BaseModel):
    """Parent of the requested path; None at a root."""

    parent: str | None
