"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter

from folio import __version__

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Basic liveness check for the shell and load balancers."""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(UTC).isoformat(),
    }
