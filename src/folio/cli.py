"""CLI entry point — ``folio ls``, ``folio parent``, ``folio serve``, ``folio mcp``."""

from __future__ import annotations

# Phase 1: Singleton logging — before fastmcp installs its handlers
from folio.logging_config import setup_logging

setup_logging(level="WARNING")

import argparse  # noqa: E402
import asyncio  # noqa: E402
import json  # noqa: E402
import sys  # noqa: E402

from folio import __version__  # noqa: E402
from folio.browser.errors import DirectoryReadFailed  # noqa: E402
from folio.browser.lister import DirectoryLister  # noqa: E402
from folio.browser.models import DirectoryEntry  # noqa: E402
from folio.commands import get_parent_path, list_files  # noqa: E402
from folio.config import Settings  # noqa: E402
from folio.constants import (  # noqa: E402
    SIZE_STEP,
    SIZE_UNITS,
    EntryKind,
    Transport,
)
from folio.logging_config import (  # noqa: E402
    cleanup_third_party_handlers,
)

# Phase 2: clear duplicate third-party handlers after all imports
cleanup_third_party_handlers()


def main() -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args()

    if args.version:
        print(f"folio {__version__}")
        return

    if args.command == "ls":
        _run_ls(args)
    elif args.command == "parent":
        _run_parent(args)
    elif args.command == "serve":
        _run_serve(args)
    elif args.command == "mcp":
        _run_mcp(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="folio",
        description=(
            "Directory listing backend for file-browser shells."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    ls = sub.add_parser(
        "ls",
        help="List a directory (default: home directory)",
    )
    ls.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to list",
    )
    ls.add_argument(
        "--json",
        action="store_true",
        help="Print entries as a JSON array",
    )

    parent = sub.add_parser(
        "parent",
        help="Print the parent of a path",
    )
    parent.add_argument("path", help="Any path; need not exist")

    serve = sub.add_parser(
        "serve",
        help="Run the HTTP API",
    )
    serve.add_argument(
        "--host",
        default=None,
        help="Bind address (default: from settings)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port (default: from settings)",
    )

    mcp_parser = sub.add_parser(
        "mcp",
        help="Start MCP server",
    )
    mcp_parser.add_argument(
        "--transport",
        "-t",
        choices=[t.value for t in Transport],
        default=Transport.STDIO.value,
        help="Transport protocol (default: stdio)",
    )
    mcp_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help=(
            "Bind address for SSE transport "
            "(default: 127.0.0.1)"
        ),
    )
    mcp_parser.add_argument(
        "--port",
        type=int,
        default=8001,
        help="Port for SSE transport (default: 8001)",
    )

    return parser


def format_size(size: int) -> str:
    """Human-readable byte count: ``512 B``, ``1.5 KB``, ``3.0 MB``."""
    if size < SIZE_STEP:
        return f"{size} B"
    value = float(size)
    unit = SIZE_UNITS[0]
    for unit in SIZE_UNITS[1:]:
        value /= SIZE_STEP
        # Compare what will be printed, so 1048575 is 1.0 MB not 1024.0 KB
        if round(value, 1) < SIZE_STEP:
            break
    return f"{value:.1f} {unit}"


def _format_row(entry: DirectoryEntry) -> str:
    kind = EntryKind.DIRECTORY if entry.is_dir else EntryKind.FILE
    return f"{kind}  {format_size(entry.size):>9}  {entry.name}"


def _run_ls(args: argparse.Namespace) -> None:
    """Execute the ls command."""
    settings = Settings()
    lister = DirectoryLister(settings.location_provider())

    try:
        entries = list_files(args.path, lister)
    except DirectoryReadFailed as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps([e.to_dict() for e in entries], indent=2))
        return
    for entry in entries:
        print(_format_row(entry))


def _run_parent(args: argparse.Namespace) -> None:
    """Print the parent path; exit 1 when there is none."""
    parent = get_parent_path(args.path)
    if parent is None:
        sys.exit(1)
    print(parent)


def _run_serve(args: argparse.Namespace) -> None:
    """Run the HTTP API under uvicorn."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "folio.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level=settings.effective_log_level.lower(),
    )


def _run_mcp(args: argparse.Namespace) -> None:
    """Start the MCP server."""
    settings = Settings()
    asyncio.run(
        _setup_and_run_mcp(
            DirectoryLister(settings.location_provider()),
            args.transport,
            args.host,
            args.port,
        )
    )


async def _setup_and_run_mcp(
    lister: DirectoryLister,
    transport: str = Transport.STDIO,
    host: str = "127.0.0.1",
    port: int = 8001,
) -> None:
    """Configure the lister and run MCP until the transport closes."""
    from folio.mcp.server import configure, mcp

    configure(lister)

    if transport == Transport.STDIO:
        await mcp.run_async(transport="stdio")
    else:
        await mcp.run_async(
            transport="sse", host=host, port=port
        )


if __name__ == "__main__":
    main()
