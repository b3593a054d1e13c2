"""Error handlers - map domain errors to HTTP responses."""

import logging

import falcon
import falcon.asgi

from bintrack.domain.exceptions import BintrackError

logger = logging.getLogger(__name__)


async def handle_bintrack_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: BintrackError, params
) -> None:
    """Render domain error with its code and HTTP status."""
    if ex.http_status >= 500:
        logger.error("%s %s failed: %s", req.method, req.path, ex, exc_info=ex)
    else:
        logger.info("%s %s rejected: %s %s", req.method, req.path, ex.code, ex)
    resp.status = falcon.code_to_http_status(ex.http_status)
    resp.media = {"error": str(ex) or ex.code, "code": ex.code}


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params
) -> None:
    """Log unhandled exception and answer 500."""
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error", "code": BintrackError.code}


def register_error_handlers(app: falcon.asgi.App) -> None:
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(BintrackError, handle_bintrack_error)
