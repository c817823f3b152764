"""HTTP plumbing shared by the FastAPI services."""

from .middleware import RequestLoggingMiddleware
from .routing import ALL_METHODS, OTHER_METHOD, UNMATCHED_ROUTE, AnyMethodRoute, method_label, route_template

__all__ = [
    "ALL_METHODS",
    "AnyMethodRoute",
    "OTHER_METHOD",
    "RequestLoggingMiddleware",
    "UNMATCHED_ROUTE",
    "method_label",
    "route_template",
]
