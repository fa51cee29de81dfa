"""Custom middleware components."""

from recipeshare.core.middleware.logging import LoggingMiddleware
from recipeshare.core.middleware.request_id import RequestIDMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
]
