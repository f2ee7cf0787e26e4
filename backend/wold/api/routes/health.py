"""Health check."""

from fastapi import APIRouter, Depends

from wold import __version__
from wold.api.deps import get_wake_handler
from wold.schemas.system import HealthResponse
from wold.services.wake_service import WakeHandler

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(handler: WakeHandler = Depends(get_wake_handler)):
    """Lightweight liveness check, reports the broadcast destination."""
    return HealthResponse(version=__version__, destination=str(handler.destination))


@router.get("/ping")
async def ping():
    """Ultra-lightweight ping."""
    return {"status": "ok"}
