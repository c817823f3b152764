"""Route helpers shared by the FastAPI services."""

from fastapi import Request
from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Receive, Scope, Send

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

OTHER_METHOD = "OTHER"
UNMATCHED_ROUTE = "unmatched"


class AnyMethodRoute(APIRoute):
    """Route that dispatches every HTTP method to its endpoint.

    The declared ``methods`` only document the route. Any other verb,
    TRACE and custom ones included, still reaches the handler, which
    answers the 405 itself.
    """

    def matches(self, scope: Scope):
        match, child_scope = super().matches(scope)
        if match == Match.PARTIAL:
            return Match.FULL, child_scope
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)


def route_template(request: Request) -> str:
    """Return the path template of the route serving the request.

    Falls back to ``UNMATCHED_ROUTE`` so that unknown paths share one
    label value.
    """
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match != Match.NONE:
            return getattr(route, "path", UNMATCHED_ROUTE)
    return UNMATCHED_ROUTE


def method_label(request: Request) -> str:
    """Return the request method, folding unknown verbs into one value."""
    if request.method in ALL_METHODS:
        return request.method
    return OTHER_METHOD
