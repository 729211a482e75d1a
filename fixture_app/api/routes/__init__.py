"""API routes package"""

from fixture_app.api.routes import greeting, health

__all__ = [
    "greeting",
    "health",
]
