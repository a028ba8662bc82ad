# app/middleware.py
# Role: HTTP middleware for the expense tracker.
#       - MethodOverrideMiddleware lets plain HTML forms reach PUT/DELETE routes
#         by posting to "<path>?_method=PUT" (or DELETE).
#       - Request logging: method, path, status, and elapsed time per request.

import logging
import time
from urllib.parse import parse_qs

from fastapi import FastAPI

logger = logging.getLogger(__name__)

OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware:
    """
    Pure ASGI middleware: rewrites POST requests carrying a `_method` query
    parameter to the requested method before routing happens.
    """

    def __init__(self, app, param: str = "_method"):
        self.app = app
        self.param = param

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["method"] == "POST":
            query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
            override = (query.get(self.param) or [""])[0].strip().upper()
            if override in OVERRIDABLE_METHODS:
                scope = dict(scope, method=override)
        await self.app(scope, receive, send)


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application."""

    @app.middleware("http")
    async def log_requests(request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            "%s %s - Status: %s - Time: %.4fs",
            request.method,
            request.url.path,
            response.status_code,
            process_time,
        )

        return response

    # Added last so it runs first (outermost), before logging and routing
    app.add_middleware(MethodOverrideMiddleware)
