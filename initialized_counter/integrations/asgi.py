"""ASGI middleware that treats each HTTP request as one unit of work.

Written as a plain ASGI callable rather than ``BaseHTTPMiddleware`` so the
downstream app runs in the same task, and therefore the same context, as
the counts it populates.

Usage::

    app = FastAPI()
    app.add_middleware(InitializedCounterMiddleware)
"""

from __future__ import annotations

from starlette.types import ASGIApp, Receive, Scope, Send

from initialized_counter import counter


class InitializedCounterMiddleware:
    """Count and report entity loads per HTTP request."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        await counter.acount_and_report(self.app, scope, receive, send)
