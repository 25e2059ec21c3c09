"""Default-location providers.

The lister asks a provider where to look when the caller supplies
no path. Implementations satisfy the protocol structurally (no
inheritance), so tests can pass any object with a ``default()``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from folio.constants import FALLBACK_ROOT

logger = logging.getLogger(__name__)


class LocationProvider(Protocol):
    def default(self) -> Path: ...


class HomeLocationProvider:
    """The invoking user's home directory, or the filesystem root.

    Home lookup failure is not an error: the provider falls back
    to ``FALLBACK_ROOT`` and logs at DEBUG.
    """

    def __init__(self, fallback: Path = Path(FALLBACK_ROOT)) -> None:
        self._fallback = fallback

    def default(self) -> Path:
        try:
            home = Path.home()
        except (RuntimeError, KeyError, OSError) as exc:
            logger.debug(
                "event=home_unresolved fallback=%s error=%s",
                self._fallback,
                exc,
            )
            return self._fallback
        # expanduser() hands back "~" untouched when it cannot resolve
        if str(home) == "~" or not str(home):
            logger.debug(
                "event=home_unresolved fallback=%s", self._fallback
            )
            return self._fallback
        return home


class FixedLocationProvider:
    """Always the same directory (configured default, tests)."""

    def __init__(self, location: str | Path) -> None:
        self._location = Path(location)

    def default(self) -> Path:
        return self._location
