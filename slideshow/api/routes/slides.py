"""Slide metadata endpoint.

Registered as a plain ASGI endpoint rather than a FastAPI path operation so
that every HTTP method, including TRACE and extension methods, reaches it.
"""

import logging

from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import Receive, Scope, Send

from slideshow.domain.slide_store import SlideStore

logger = logging.getLogger(__name__)

SLIDES_PATH = "/api/slides"


def get_slide_store(request: Request) -> SlideStore:
    """Return the store owned by the running app."""
    return request.app.state.slide_store


def slides_response(store: SlideStore) -> Response:
    """Every slide, in display order, as a JSON array; 500 if encoding fails."""
    try:
        body = store.to_json()
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to encode slides: {e}", exc_info=True)
        return PlainTextResponse("Failed to encode slides", status_code=500)

    return Response(
        content=body,
        media_type="application/json",
        headers={"Cache-Control": "no-cache"},
    )


class SlidesEndpoint:
    """ASGI endpoint for /api/slides.

    The method is not checked and no body or query parameters are read.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        response = slides_response(get_slide_store(request))
        await response(scope, receive, send)
