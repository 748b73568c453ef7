"""Health check endpoint. No dependencies; used for liveness checks."""

from fastapi import APIRouter

from solarflow.core.config import get_settings
from solarflow.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status and the configured backend."""
    return HealthResponse(backend=get_settings().database_backend)
