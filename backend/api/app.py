"""
FastAPI application factory.

Creates and configures the FastAPI application instance. There is no
module-level app: uvicorn builds one through create_app (factory=True).
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from modules.proposals.routes import router as proposals_router
from .dependencies import ServiceContainer, build_container
from .errors import register_exception_handlers
from .routes import auth, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Creates the provider clients once at startup unless a container
    was supplied to create_app, and releases them on shutdown.
    """
    settings: Settings = app.state.settings
    if app.state.container is None:
        app.state.container = await build_container(settings)
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    logger.info(f"Shutting down {settings.app_name}")
    await app.state.container.aclose()


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Loaded settings; read from the environment when omitted
        container: Pre-built services, mainly for tests

    Returns:
        Configured FastAPI instance

    Raises:
        ConfigurationError: If required environment variables are missing
    """
    settings = settings or (container.settings if container else get_settings())

    app = FastAPI(
        title=settings.app_name,
        description="Proposal management backend",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.container = container

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth.router, tags=["auth"])
    app.include_router(proposals_router, prefix="/propostas", tags=["proposals"])

    return app
