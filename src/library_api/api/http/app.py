"""FastAPI application factory and setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from src.library_api import __version__
from src.library_api.api.http.app_data import ApplicationDependencies
from src.library_api.api.http.middleware.request_logging import (
    SecurityHeadersMiddleware,
    log_requests,
)
from src.library_api.api.http.routers.health import router as health_router
from src.library_api.api.http.routers.resources import create_resource_router
from src.library_api.api.utils.app_startup import configure_logging
from src.library_api.core.services import DbManageService, DbSessionService
from src.library_api.entities.registry import RESOURCES
from src.library_api.runtime.context import get_config

__all__ = ["app", "create_app", "startup", "shutdown"]


def startup(app: FastAPI, database_service: DbSessionService | None = None) -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = database_service or DbSessionService()
    DbManageService(database_service.engine).create_all()
    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
    )


def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    app_dependencies.database_service.dispose()


def create_app(database_service: DbSessionService | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        database_service: Database service to use instead of one built from
            configuration at startup
    """
    config = get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        startup(app, database_service)
        try:
            yield
        finally:
            shutdown(app)

    is_production = config.app.environment == "production"
    app = FastAPI(
        title="Library API",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    app.add_middleware(SecurityHeadersMiddleware)

    if is_production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    app.include_router(health_router)
    for resource in RESOURCES:
        app.include_router(create_resource_router(resource), prefix=f"/{resource.name}")

    return app


configure_logging()

app = create_app()
