"""
Static asset serving.

Starlette's StaticFiles does the lookup (in a worker thread), keeps requests
inside the directory, serves index.html for directories and redirects
directory paths that lack a trailing slash. This subclass changes how
failures are reported: a file that exists but cannot be read is a 500
rather than a 401 or a truncated body, and unknown extensions are sent as
application/octet-stream.
"""

import errno
import logging
import mimetypes
from pathlib import Path

import anyio.to_thread
from starlette.exceptions import HTTPException
from starlette.responses import FileResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from portfolio.exceptions import PortfolioError

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = "application/octet-stream"


class UnreadableAsset(PortfolioError):
    """A static path exists but the filesystem refused to look at it."""


class StaticAssets(StaticFiles):
    """StaticFiles that answers 500 for unreadable files."""

    def lookup_path(self, path: str):
        try:
            return super().lookup_path(path)
        except OSError as e:
            # Too long to exist; StaticFiles answers 404 for this one
            if e.errno == errno.ENAMETOOLONG:
                raise
            raise UnreadableAsset(f"{path}: {e}") from e

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            response = await super().get_response(path, scope)
        except UnreadableAsset as e:
            logger.warning(f"Failed to look up static file {e}")
            raise HTTPException(status_code=500)

        if isinstance(response, FileResponse):
            # Open before the headers go out so a read failure can still be a 500
            try:
                await anyio.to_thread.run_sync(_check_readable, response.path)
            except OSError as e:
                logger.warning(f"Failed to read static file {path!r}: {e}")
                raise HTTPException(status_code=500)

        return response

    def file_response(self, full_path, stat_result, scope: Scope, status_code: int = 200) -> Response:
        response = super().file_response(full_path, stat_result, scope, status_code)
        if "content-type" in response.headers and mimetypes.guess_type(str(full_path))[0] is None:
            response.headers["content-type"] = DEFAULT_MEDIA_TYPE
        return response


def _check_readable(path) -> None:
    with Path(path).open("rb"):
        pass
