"""Health check."""

from fastapi import APIRouter

from wol_service import __version__
from wol_service.schemas.system import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Lightweight liveness check."""
    return HealthResponse(version=__version__)
