"""CORS Allow-List — origin + method enforcement at the ASGI boundary.

Invariants:
    - CORS headers added only when Origin exactly matches a configured origin
      AND the declared method is allow-listed
    - Declared method = Access-Control-Request-Method on a preflight, else the
      request method
    - Disallowed requests pass through untouched: the handler runs and its
      status code is never altered, only the Access-Control-* headers are omitted
    - Never echoes an origin that is not configured, no wildcard

Design Decisions:
    - Pure ASGI middleware over Starlette's CORSMiddleware: the stock one
      grants simple requests regardless of method, and keeps allow-origin on
      rejected preflights
"""

import logging
from typing import Sequence

from starlette.datastructures import Headers, MutableHeaders
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class AllowListCorsMiddleware:
    """Add CORS headers for allow-listed (origin, method) pairs only."""

    def __init__(
        self,
        app: ASGIApp,
        allow_origins: Sequence[str] = (),
        allow_methods: Sequence[str] = (),
    ):
        self.app = app
        self.allow_origins = frozenset(allow_origins)
        self.allow_methods = tuple(m.upper() for m in allow_methods)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        origin = headers.get("origin")
        if origin is None:
            await self.app(scope, receive, send)
            return

        requested = headers.get("access-control-request-method")
        is_preflight = scope["method"] == "OPTIONS" and requested is not None
        declared = requested if is_preflight else scope["method"]

        if not self.is_allowed(origin, declared):
            logger.debug(
                "CORS headers omitted",
                extra={"origin": origin, "method": declared, "path": scope.get("path")},
            )
            await self.app(scope, receive, send)
            return

        cors_headers = self.cors_headers(origin)
        if is_preflight:
            response = PlainTextResponse("OK", status_code=200, headers=cors_headers)
            await response(scope, receive, send)
            return

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                response_headers = MutableHeaders(scope=message)
                for key, value in cors_headers.items():
                    if key == "Vary":
                        response_headers.add_vary_header(value)
                    else:
                        response_headers[key] = value
            await send(message)

        await self.app(scope, receive, send_with_cors)

    def is_allowed(self, origin: str, method: str) -> bool:
        return origin in self.allow_origins and method.upper() in self.allow_methods

    def cors_headers(self, origin: str) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Methods": ", ".join(self.allow_methods),
            "Vary": "Origin",
        }
