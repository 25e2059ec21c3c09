"""Lexical parent-path computation for "go up" navigation."""

from __future__ import annotations

import os
import re
from pathlib import PurePath

_SEPARATORS = re.compile(
    "[" + re.escape(os.sep + (os.altsep or "")) + "]+"
)
_CURDIR = "."


def parent_path(path: str) -> str | None:
    """Parent of ``path``, or None for a root or an empty path.

    Pure path algebra: the path need not exist and the filesystem
    is never touched. Repeated and trailing separators are ignored
    and interior ``.`` components dropped, but a leading ``.`` is a
    component of its own, so ``"./a"`` goes up to ``"."`` and
    ``"."`` goes up to the empty path ``""``. ``..`` is never
    collapsed: ``"a/.."`` goes up to ``"a"``.
    """
    if not path:
        return None

    anchor = PurePath(path).anchor
    rest = path[len(anchor):] if path.startswith(anchor) else path
    parts = [p for p in _SEPARATORS.split(rest) if p]
    components = [
        p for i, p in enumerate(parts)
        if p != _CURDIR or (i == 0 and not anchor)
    ]
    if not components:
        return None

    remaining = os.sep.join(components[:-1])
    if anchor:
        return anchor + remaining
    return remaining
