"""API schemas package"""

from fixture_app.api.schemas.health import HealthStatus

__all__ = [
    "HealthStatus",
]
