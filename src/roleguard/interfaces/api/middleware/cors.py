"""CORS middleware for browser clients of the roles API."""

import falcon.asgi

_ALLOWED_METHODS = "GET, POST, PUT, PATCH, DELETE, OPTIONS"


class CORSMiddleware:
    """Echoes allowed origins back and answers OPTIONS preflight directly."""

    def __init__(self, origins: list[str]) -> None:
        self._origins = set(origins)

    def _apply_headers(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        origin = req.get_header("Origin")
        if not origin or ("*" not in self._origins and origin not in self._origins):
            return
        resp.set_header("Access-Control-Allow-Origin", origin)
        resp.set_header("Access-Control-Allow-Methods", _ALLOWED_METHODS)
        resp.set_header("Access-Control-Allow-Headers", "Authorization, Content-Type")
        resp.set_header("Access-Control-Max-Age", "86400")
        resp.append_header("Vary", "Origin")

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.method == "OPTIONS":
            self._apply_headers(req, resp)
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        if req.method != "OPTIONS":
            self._apply_headers(req, resp)
