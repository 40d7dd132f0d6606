"""
Decoy API Application.

This module provides the FastAPI application configuration for running
the admin on its own. Host applications can instead build their own
FastAPI app and hand it to DecoyServiceProvider.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Iterable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from decoy import __version__
from decoy.api.schemas.common import HealthResponse
from decoy.controllers.registry import ControllerRegistry
from decoy.core import config
from decoy.db.connection import close_db, init_db
from decoy.provider import DecoyServiceProvider

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.

    Sets up and tears down database connections.
    """
    # Startup
    logger.info("Starting up Decoy admin...")
    await init_db()
    logger.info("Database initialized")
    yield
    # Shutdown
    logger.info("Shutting down Decoy admin...")
    await close_db()
    logger.info("Database connections closed")


def create_app(
    auth_class: Optional[str] = None,
    controller_modules: Optional[Iterable[str]] = None,
    registry: Optional[ControllerRegistry] = None,
) -> FastAPI:
    """
    Build the admin application.

    Args:
        auth_class: Dotted path of the auth strategy.
        controller_modules: Modules defining admin controllers.
        registry: Controller registry to resolve routes against.

    Returns:
        The configured FastAPI app.
    """
    app = FastAPI(
        title="Decoy Admin",
        description="""
    Decoy - administrative CMS add-on

    This API provides endpoints for:
    - Admin authentication
    - Resolving nested admin routes and their ancestry
    """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    provider = DecoyServiceProvider(app, registry=registry)
    provider.register()
    provider.boot(auth_class=auth_class, controller_modules=controller_modules)

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(status="healthy", version=__version__)

    @app.get(
        "/",
        tags=["Root"],
        summary="Root endpoint",
        description="API root endpoint with basic information.",
    )
    async def root():
        """
        Root endpoint.

        Returns basic API information.
        """
        return {
            "name": "Decoy Admin",
            "version": __version__,
            "admin": f"/{app.state.decoy.dir}",
            "settings": app.state.decoy.model_dump(),
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "decoy.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
