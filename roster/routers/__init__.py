"""
FastAPI routers grouped by resource (players, users, health).

Each module exposes an APIRouter included by roster.app. Services are
looked up on ``request.app.state`` so the app decides how they are built.
"""

from roster.routers.health import router as health_router
from roster.routers.players import router as players_router
from roster.routers.users import router as users_router

__all__ = ["health_router", "players_router", "users_router"]
