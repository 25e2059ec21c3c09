"""Error types raised by the browsing core."""

from __future__ import annotations

from folio.constants import READ_FAILED_PREFIX


class FolioError(Exception):
    """Base class for all folio errors."""


class DirectoryReadFailed(FolioError):
    """The target path could not be opened as a directory.

    Covers a missing path, a path that is not a directory, and
    permission denied. ``str(exc)`` is the human-readable cause
    handed back to the caller as-is. The path itself is kept on
    the exception but left out of the message.
    """

    def __init__(self, path: str, cause: OSError | str) -> None:
        self.path = path
        if isinstance(cause, OSError):
            reason = cause.strerror or cause.__class__.__name__
        else:
            reason = cause
        self.message = f"{READ_FAILED_PREFIX}: {reason}"
        super().__init__(self.message)
