from fastapi import FastAPI

from .activities import router as activities_router
from .dashboard import router as dashboard_router
from .info import router as info_router
from .metrics import router as metrics_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(info_router)
    app.include_router(dashboard_router)
    app.include_router(metrics_router)
    app.include_router(activities_router)
