"""
Todoolittle Backend: Request Logging Middleware
=================================================

What:  One access-log line per request: method, path, matched route, status,
       duration, request ID and client address.
Who:   Runs inside RequestIDMiddleware, so the request ID is already set.

Level by status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

A request whose handler raises an unhandled exception is logged as a 500
before the exception continues to the catch-all handler. Redirects log
their Location, so each POST /todos line shows where the browser goes next.

Form bodies are never logged; todo descriptions and greetings are user text.
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from todoolittle.middleware.request_id import request_id_var

logger = logging.getLogger("todoolittle.access")

# Not access-logged
QUIET_PATHS = {"/health"}


def route_name(request: Request) -> str:
    """Name of the endpoint that handled the request, or "-" when none matched."""
    route = request.scope.get("route")
    return getattr(route, "name", None) or "-"


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, start_time, location=None)
            raise

        self._log(request, response.status_code, start_time, response.headers.get("location"))
        return response

    def _log(
        self,
        request: Request,
        status: int,
        start_time: float,
        location: Optional[str],
    ) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")
        client_ip = request.client.host if request.client else "unknown"
        name = route_name(request)
        suffix = f" -> {location}" if location else ""

        logger.log(
            level_for_status(status),
            "%s %s (%s) %d%s %.1fms [%s] from %s",
            request.method,
            request.url.path,
            name,
            status,
            suffix,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "route": name,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
