import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from activity_dashboard.config import get_settings
from activity_dashboard.interfaces.api.dependencies import get_activity_repository
from activity_dashboard.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and load the activity catalog when the app starts."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(settings.log_level)

    repository = get_activity_repository()
    logger.info(
        "Serving %d activities for %s (%s)",
        len(repository.list_all()),
        settings.school_name,
        settings.reporting_window,
    )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    app = FastAPI(title="Activities & Programs Dashboard", lifespan=lifespan)

    # Browser clients serving the dashboard page.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
