from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wikidiscussion.app import App
from wikidiscussion.config import Config
from wikidiscussion.errors import UserError
from wikidiscussion.web.error_handlers import general_exception_handler, user_error_handler
from wikidiscussion.web.openapi import set_custom_openapi
from wikidiscussion.web.routers import (
    comments_router,
    metadata_router,
    pages_router,
    profile_router,
    threads_router,
)


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="Wiki Discussion API",
        lifespan=lifespan,
    )
    # Set before startup so dependencies also work without running the lifespan
    app.state.app = app_instance
    app.state.config = config

    # Feed renderers may live on another origin
    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    # Health check endpoint (at root level, not versioned)
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    # API v1 routes
    app.include_router(threads_router, prefix="/api/v1")
    app.include_router(comments_router, prefix="/api/v1")
    app.include_router(pages_router, prefix="/api/v1")
    app.include_router(profile_router, prefix="/api/v1")
    app.include_router(metadata_router, prefix="/api/v1")

    # Register error handlers
    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
