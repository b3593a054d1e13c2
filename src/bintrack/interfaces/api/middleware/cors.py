"""CORS middleware for the inventory frontend."""

import falcon
import falcon.asgi

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = "Authorization, Content-Type, X-User-Id"


class CORSMiddleware:
    """Echo allowed origins and short-circuit preflight requests.

    Requests from origins outside the allow list get no CORS headers, so the
    browser blocks them.
    """

    def __init__(self, origins: list[str]) -> None:
        self._origins = frozenset(origins)

    def _allow(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        origin = req.get_header("Origin")
        if not origin or origin not in self._origins:
            return
        resp.set_header("Access-Control-Allow-Origin", origin)
        resp.append_header("Vary", "Origin")
        resp.set_header("Access-Control-Allow-Methods", ALLOWED_METHODS)
        resp.set_header("Access-Control-Allow-Headers", ALLOWED_HEADERS)
        resp.set_header("Access-Control-Max-Age", "86400")

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.method != "OPTIONS":
            return
        self._allow(req, resp)
        resp.status = falcon.HTTP_204
        resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        self._allow(req, resp)
