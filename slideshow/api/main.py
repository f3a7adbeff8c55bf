"""FastAPI application for the quote slideshow.

create_app() wires the slide store into the app and mounts, in order:
    /api/...    slide metadata and health
    /images/    image directory, publicly cacheable
    /           static assets, HTML uncached
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from slideshow import __version__
from slideshow.api.routes import slides
from slideshow.api.static import ImageFiles, StaticAssets
from slideshow.config.settings import AppSettings, get_settings
from slideshow.domain.slide_store import SlideStore

logger = logging.getLogger(__name__)


def create_app(store: SlideStore, settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Build the FastAPI app around an already-populated slide store.

    Args:
        store: Slides to serve; read-only for the lifetime of the app
        settings: Application settings; defaults to get_settings()

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    storage = settings.storage
    max_age = settings.cache.max_age_seconds

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup/shutdown events."""
        logger.info(
            f"Starting slideshow server with {len(store)} slides "
            f"(environment: {settings.environment})"
        )
        yield
        logger.info("Shutting down slideshow server")

    app = FastAPI(
        title="Quote Slideshow",
        description="Serves an image slideshow with quotes",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.slide_store = store
    app.state.settings = settings

    app.add_route(slides.SLIDES_PATH, slides.SlidesEndpoint(), name="slides")

    @app.get("/api/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": __version__,
            "slides": len(store),
        }

    if not storage.static_dir.is_dir():
        logger.warning(
            f"Static directory not found: {storage.static_dir}. "
            "Requests under / will return 404."
        )

    app.mount(
        "/images",
        ImageFiles(directory=storage.images_dir, max_age=max_age),
        name="images",
    )
    app.mount(
        "/",
        StaticAssets(directory=storage.static_dir, html=True, max_age=max_age),
        name="static",
    )

    return app
