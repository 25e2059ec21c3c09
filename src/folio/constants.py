"""Shared constants — single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
StrEnum members are str-compatible, so downstream code (JSON, CLI
output, MCP tool payloads) works unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class EntryKind(StrEnum):
    """Single-letter kind marker used in CLI listings."""

    DIRECTORY = "d"
    FILE = "-"


class Transport(StrEnum):
    """MCP server transports exposed by ``folio mcp``."""

    STDIO = "stdio"
    SSE = "sse"


# ── Listing ──────────────────────────────────────────────

HIDDEN_PREFIX = "."
FALLBACK_ROOT = "/"
READ_FAILED_PREFIX = "Failed to read directory"

# ── Size Formatting ──────────────────────────────────────

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
SIZE_STEP = 1024

# ── Auth Exempt Paths ────────────────────────────────────

AUTH_EXEMPT_PATHS = frozenset({
    "/api/health",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
})

AUTH_EXEMPT_PREFIXES = ("/api/health",)

AUTH_EXEMPT_METHODS = frozenset({"GET", "HEAD"})

API_KEY_HEADER = "X-API-Key"

# ── Logging ──────────────────────────────────────────────

LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})
