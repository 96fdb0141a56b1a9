"""
Health Check Endpoints

Provides the health status endpoint.
"""
from fastapi import APIRouter

from clamm_math import ZERO_SQRT_RATIO, ClammMathError
from clamm_math.math.tick_math import get_tick_at_sqrt_ratio

from app.api.schemas import HealthCheckResponse
from app.config import settings

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """
    Health check endpoint

    Returns the current health status of the API. The math library is
    exercised once so a broken install reports unhealthy.
    """
    try:
        get_tick_at_sqrt_ratio(ZERO_SQRT_RATIO)
        status = "healthy"
    except ClammMathError:
        status = "unhealthy"

    return HealthCheckResponse(
        status=status,
        version=settings.API_VERSION,
    )
