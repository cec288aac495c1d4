"""FastAPI ASGI middleware for request logging."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """ASGI middleware that logs every HTTP request once it has been answered.

    Log line format: ``[METHOD]\\t/path\\tSTATUS\\t0.004s``.

    Usage:
        from mysql_health_fastapi.middleware import RequestLoggingMiddleware

        app.add_middleware(RequestLoggingMiddleware)
    """

    def __init__(self, app: "ASGIApp") -> None:
        """Initialize the request logging middleware.

        Args:
            app: ASGI application to wrap
        """
        self.app = app

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        """Time the request and log it after the response is sent.

        Non-HTTP scopes (websocket, lifespan) pass through without logging.
        """
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: "Message") -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            path = scope.get("path", "/")
            query_string = scope.get("query_string", b"").decode("utf-8")
            if query_string:
                path = f"{path}?{query_string}"
            logger.info(
                f"[{scope.get('method', 'GET')}]\t{path}\t{status_code}\t"
                f"{time.perf_counter() - start:.3f}s"
            )
