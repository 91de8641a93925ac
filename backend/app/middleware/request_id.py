"""
Booklist Backend - Request ID Middleware
=========================================

What:  Assigns an ID to each incoming request and echoes it in the response.
Why:   Every log line and every error body of one request carries the same
       ID, so a client-reported error can be matched to server logs.
How:   Reuses the client's X-Request-ID header or generates a short UUID,
       stores it in a ContextVar, and returns it in the response header.
When:  Outermost application middleware (runs before logging).
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate one (first 8 chars of a UUID4)
        3. Store in the ContextVar and in request.state
        4. Add it to the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        # Not reset afterwards: the catch-all error handler runs outside this
        # middleware and still reads it
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers["X-Request-ID"] = rid
        return response
