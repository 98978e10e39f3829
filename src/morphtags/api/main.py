"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from morphtags import __version__
from morphtags.api.routes import router
from morphtags.config import Settings, load_settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the tooltip API application."""
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="morphtags",
        description="Readable descriptions of RMAC and WIVU morphology codes",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Tooltips are fetched from statically generated chapter pages
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "morphtags",
            "version": __version__,
            "docs": "/docs",
            "api": "/api/v1",
        }

    return app
