from fastapi import APIRouter

from fixture_app.api.schemas.health import HealthStatus

router = APIRouter()


# trailing slash is answered directly instead of the default 307 redirect
@router.api_route("/health/", methods=["GET", "HEAD"], response_model=HealthStatus, include_in_schema=False)
@router.api_route(
    "/health",
    methods=["GET", "HEAD"],
    response_model=HealthStatus,
    summary="Liveness check",
)
async def health_check() -> HealthStatus:
    """Return a simple status payload confirming the service is alive."""
    return HealthStatus()
