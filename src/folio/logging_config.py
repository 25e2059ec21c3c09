"""Singleton logging configuration — two-phase initialization.

Phase 1: setup_logging() — call at process start, before serving.
  Configures the root logger and quiets chatty third-party loggers.

Phase 2: cleanup_third_party_handlers() — call AFTER all imports.
  Clears the handlers FastMCP attaches to its own loggers at import
  time so records are emitted once, through root.

Both phases are idempotent (guarded by module-level flags).
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

# Third-party loggers to suppress to WARNING
_SUPPRESSED_LOGGERS = (
    "httpx",
    "uvicorn.access",
    "mcp",
)

# Loggers that install their own handlers on import
_SELF_HANDLED_LOGGERS = (
    "FastMCP",
    "fastmcp",
)

_phase1_done = False
_phase2_done = False


def setup_logging(level: str = "INFO") -> None:
    """Phase 1: Configure root logger.

    Idempotent — second call is a no-op.
    """
    global _phase1_done  # noqa: PLW0603
    if _phase1_done:
        return
    _phase1_done = True

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    for name in _SUPPRESSED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def cleanup_third_party_handlers() -> None:
    """Phase 2: Remove FastMCP's own StreamHandlers.

    FastMCP attaches a handler to its logger on import, so every
    record shows up twice (its handler + root propagation). This
    clears them and lets messages propagate to root only.

    Idempotent — second call is a no-op.
    """
    global _phase2_done  # noqa: PLW0603
    if _phase2_done:
        return
    _phase2_done = True

    for name in _SELF_HANDLED_LOGGERS:
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.propagate = True
