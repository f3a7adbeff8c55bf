"""Static file mounts with cache headers.

Both classes delegate file lookup, 404 and 405 to Starlette's StaticFiles and
only decorate the response. Error responses get the same headers as files.
"""

import logging
import os
import time
from abc import ABC, abstractmethod
from email.utils import formatdate

from starlette.exceptions import HTTPException
from starlette.responses import PlainTextResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

logger = logging.getLogger(__name__)

NO_CACHE = "no-cache, no-store, must-revalidate"
CACHEABLE_SUFFIXES = (".css", ".js")


def public_cache_control(max_age: int) -> str:
    return f"public, max-age={max_age}"


class _CachingStaticFiles(StaticFiles, ABC):
    """StaticFiles that always passes its response through apply_headers()."""

    def __init__(self, *, directory: str | os.PathLike[str], max_age: int = 86400, **kwargs):
        super().__init__(directory=directory, check_dir=False, **kwargs)
        self.max_age = max_age

    async def check_config(self) -> None:
        # A missing directory serves 404s instead of failing every request.
        if self.directory is not None and not os.path.isdir(self.directory):
            return
        await super().check_config()

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            response = await super().get_response(path, scope)
        except HTTPException as exc:
            response = PlainTextResponse(
                exc.detail, status_code=exc.status_code, headers=exc.headers
            )
        self.apply_headers(path, response)
        return response

    @abstractmethod
    def apply_headers(self, path: str, response: Response) -> None:
        """Set cache headers on a response for the mount-relative path."""


class StaticAssets(_CachingStaticFiles):
    """Site root: CSS and JS are cached for max_age, everything else is not."""

    def apply_headers(self, path: str, response: Response) -> None:
        if path.endswith(CACHEABLE_SUFFIXES):
            response.headers["Cache-Control"] = public_cache_control(self.max_age)
        else:
            response.headers["Cache-Control"] = NO_CACHE


class ImageFiles(_CachingStaticFiles):
    """Image directory: every response is publicly cacheable for max_age."""

    def apply_headers(self, path: str, response: Response) -> None:
        response.headers["Cache-Control"] = public_cache_control(self.max_age)
        response.headers["Expires"] = formatdate(time.time() + self.max_age, usegmt=True)
