"""HTTP middleware for cross-cutting request concerns.

Request correlation binds a request id into structlog's contextvars so
every probe event emitted while handling the request carries it. The
security headers mirror the defaults of the helmet middleware commonly
placed in front of JSON APIs.

Register ``request_context_middleware`` inside
``security_headers_middleware`` so generic 500 responses produced by the
former still pass through the latter.
"""

from __future__ import annotations

import uuid
from typing import Awaitable, Callable

import structlog
from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from infrastructure.observability import StartupProbe

REQUEST_ID_HEADER = "X-Request-ID"

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Referrer-Policy": "no-referrer",
}

CallNext = Callable[[Request], Awaitable[Response]]


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an exception no route handled and answer with a bare 500.

    Nothing about the failure is returned to the client.
    """
    probe: StartupProbe = request.app.state.startup_probe
    probe.unhandled_error(request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


async def request_context_middleware(request: Request, call_next: CallNext) -> Response:
    """Bind a request id for the request and echo it back.

    Uses the client-supplied X-Request-ID when present, otherwise a new uuid4.
    Exceptions escaping the route become a logged generic 500 here, while
    the id is still bound, so that response carries the header too.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )
    try:
        response = await call_next(request)
    except Exception as exc:
        response = await unhandled_exception_handler(request, exc)

    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def security_headers_middleware(request: Request, call_next: CallNext) -> Response:
    """Add hardening headers to every response without overriding handlers."""
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response
