from fastapi import APIRouter

from fixture_app.api.routes import greeting, health

api_router = APIRouter()

api_router.include_router(greeting.router, tags=["greeting"])

# liveness probe
api_router.include_router(health.router, tags=["health"])
