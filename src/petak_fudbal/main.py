"""
Petak Fudbal API - Main Application

FastAPI application serving awards, player profiles and rivalries.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from petak_fudbal import __version__
from petak_fudbal.api.dependencies import ClientManager
from petak_fudbal.api.routes import awards, matches, periods, players, rivalries
from petak_fudbal.config import get_settings
from petak_fudbal.utils.logger import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting Petak Fudbal API v%s", __version__)
    logger.info("Debug mode: %s", settings.debug)
    logger.info(
        "Award thresholds: eff=%d form=%d, timezone %s",
        settings.min_matches_eff,
        settings.min_matches_form,
        settings.timezone,
    )

    yield

    # Shutdown
    logger.info("Shutting down Petak Fudbal API")
    await ClientManager.close_client()


def create_app() -> FastAPI:
    """Application factory to create the FastAPI app."""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.api_title,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "endpoints": {
                "periods": "/api/periods",
                "awards": "/api/awards",
                "matches": "/api/matches",
                "players": "/api/players",
                "rivalries": "/api/rivalries",
            },
        }

    # Register API routes
    app.include_router(periods.router, prefix="/api/periods", tags=["Periods"])
    app.include_router(awards.router, prefix="/api/awards", tags=["Awards"])
    app.include_router(matches.router, prefix="/api/matches", tags=["Matches"])
    app.include_router(players.router, prefix="/api/players", tags=["Players"])
    app.include_router(rivalries.router, prefix="/api/rivalries", tags=["Rivalries"])

    return app


# Create the application instance
app = create_app()


def run():
    """Run the application (used by the petak-api entry point)."""
    settings = get_settings()
    uvicorn.run(
        "petak_fudbal.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
