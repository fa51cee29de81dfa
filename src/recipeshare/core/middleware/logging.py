"""Access logging middleware.

Logs one line when a request starts and one when it completes, with the
status code and processing time. The time is also returned in the
X-Process-Time header, and requests slower than the configured threshold
are logged as warnings.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipeshare.observability.logging import bind_context, get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = get_logger(__name__)

DEFAULT_EXCLUDED_PATHS = frozenset({"/favicon.ico"})


class LoggingMiddleware(BaseHTTPMiddleware):
    """Structured request/response logging with timing."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        exclude_paths: set[str] | frozenset[str] | None = None,
        slow_threshold: float = 1.0,
        timing_header: str = "X-Process-Time",
    ) -> None:
        super().__init__(app)
        self.exclude_paths = (
            exclude_paths if exclude_paths is not None else DEFAULT_EXCLUDED_PATHS
        )
        self.slow_threshold = slow_threshold
        self.timing_header = timing_header

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        bind_context(
            method=request.method,
            path=request.url.path,
            client_ip=self._get_client_ip(request),
        )
        logger.debug(
            "Request started",
            query_params=str(request.query_params) if request.query_params else None,
        )

        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        elapsed_ms = round(elapsed * 1000, 2)

        response.headers[self.timing_header] = f"{elapsed_ms}ms"
        logger.info(
            "Request completed",
            status_code=response.status_code,
            process_time_ms=elapsed_ms,
        )
        if elapsed > self.slow_threshold:
            logger.warning(
                "Slow request detected",
                process_time_ms=elapsed_ms,
                threshold_ms=self.slow_threshold * 1000,
            )
        return response

    @staticmethod
    def _get_client_ip(request: Request) -> str:
        """Client address, preferring proxy headers when present."""
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host
        return "unknown"
