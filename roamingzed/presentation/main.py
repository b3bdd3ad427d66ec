"""
FastAPI Application Entry Point.

HTTP host for the RoamingZed extension. Editors or runtimes that cannot
load the extension in-process reach its slash commands and context server
descriptor through these routes.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roamingzed import __version__
from roamingzed.infrastructure.config.log_setup import configure_logging
from roamingzed.infrastructure.config.settings import get_settings
from roamingzed.presentation.api.routers import commands_router, context_server_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    settings = get_settings()
    logger.info(f"Starting RoamingZed host on {settings.host}:{settings.port}")
    logger.info(f"Debug mode: {settings.debug}")

    yield

    logger.info("Shutting down RoamingZed host")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="RoamingZed",
        description="Wikilink slash commands and MCP context server for Zed",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(commands_router)
    app.include_router(context_server_router)

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "RoamingZed",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "roamingzed.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
