import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from roster.core.config import get_settings
from roster.core.error_handlers import install_error_handlers
from roster.core.logs import configure_logging
from roster.core.responses import UTF8JSONResponse
from roster.repositories.sql_repository import PlayerRepository, UserRepository
from roster.routers import health_router, players_router, users_router
from roster.services.player_service import PlayerService
from roster.services.user_service import UserService

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables unless the schema is managed elsewhere."""
    if get_settings().create_tables:
        from roster.db.create_tables import create_all

        create_all()
    logger.info("Roster API started (env=%s)", get_settings().app_env)
    yield
    logger.info("Roster API stopped")


app = FastAPI(title="Roster API", default_response_class=UTF8JSONResponse, lifespan=lifespan)

app.state.player_service = PlayerService(PlayerRepository())
app.state.user_service = UserService(UserRepository())

install_error_handlers(app)

app.include_router(health_router)
app.include_router(players_router)
app.include_router(users_router)


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    return app
