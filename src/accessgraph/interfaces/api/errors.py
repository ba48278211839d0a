"""Error handlers for the API."""

import logging

import falcon
import falcon.asgi

from accessgraph.domain.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


async def handle_store_unavailable(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: StoreUnavailable, params
) -> None:
    """Could not determine the permission: refuse, but not as a deny."""
    logger.error("Store unavailable during %s %s: %s", req.method, req.path, ex)
    resp.status = falcon.HTTP_503
    resp.media = {"error": "Permission check unavailable", "code": "STORE_UNAVAILABLE"}


async def handle_unexpected(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params
) -> None:
    logger.error("Unhandled error during %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}
