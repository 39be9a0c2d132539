"""
Todoolittle Backend: Request ID Middleware
============================================

What:  Gives every request a correlation ID and echoes it in X-Request-ID.
How:   Reuses the client's X-Request-ID header when it is a short token,
       otherwise generates a short UUID. The value is stored in a ContextVar
       (for loggers and exception handlers) and on request.state (for
       handlers).

The ID ends up in log lines and a response header, so client values are
only accepted when they match REQUEST_ID_PATTERN.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"
REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def resolve_request_id(header_value: Optional[str]) -> str:
    """Return the client's ID if it is acceptable, else a fresh 8-char one."""
    if header_value and REQUEST_ID_PATTERN.match(header_value):
        return header_value
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        # Not reset afterwards: the catch-all 500 handler runs outside this
        # middleware and still reads it
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
