"""
Health check router.

Liveness check for the hosting platform. Also reports which optional
collaborators are configured, without touching them.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description=(
        "Returns status, version, supported locales and whether the "
        "questions datastore and market-data key are configured."
    ),
)
def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=settings.version,
        locales=settings.locales,
        datastore_configured=settings.is_datastore_configured(),
        market_key_configured=bool(settings.coingecko_api_key),
    )
