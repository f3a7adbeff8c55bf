"""
slideshow CLI.

Usage:
    slideshow                  # Start the server (default)
    slideshow serve --port N   # Start the server on another port
    slideshow init             # Create slides.json if needed, then exit

Also runnable as ``python -m slideshow``.
"""

import logging
from typing import Optional

import click
import uvicorn

from slideshow.api.main import create_app
from slideshow.config.loader import ConfigurationError
from slideshow.config.settings import AppSettings, get_settings
from slideshow.domain.slide_store import SlideStore
from slideshow.services.bootstrap import load_slides
from slideshow.utils.error_handling import BootstrapError, format_exception_for_logging
from slideshow.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _startup() -> tuple[AppSettings, SlideStore]:
    """Load settings and slides; any failure here is fatal."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        raise SystemExit(1) from e

    setup_logging(settings.logging.level, settings.logging.format)

    try:
        store = load_slides(settings)
    except BootstrapError as e:
        logger.error(f"Failed to load slides: {format_exception_for_logging(e)}")
        raise SystemExit(1) from e

    return settings, store


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """Quote slideshow server.

    Run 'slideshow' to start the server, or 'slideshow --help' for more commands.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(serve)


@cli.command()
@click.option("--host", default=None, help="Interface to bind (default: settings / HOST)")
@click.option("--port", type=int, default=None, help="Port to bind (default: settings / PORT)")
def serve(host: Optional[str], port: Optional[int]):
    """Load slides and start the HTTP server."""
    settings, store = _startup()
    app = create_app(store, settings)

    host = host or settings.server.host
    port = port or settings.server.port
    logger.info(f"Server starting on port {port}...")
    uvicorn.run(app, host=host, port=port, log_config=None)


@cli.command()
def init():
    """Create slides.json from the images directory if it does not exist."""
    settings, store = _startup()
    click.echo(f"{len(store)} slides available in {settings.storage.slides_file}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
