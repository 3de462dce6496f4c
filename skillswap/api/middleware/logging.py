"""
Request logging and metrics middleware.
"""

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response

from skillswap.config.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
)
from skillswap.infrastructure.monitoring.metrics import record_api_request

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _route_template(request: Request) -> str:
    """Matched route path, so metrics are not labelled per document id."""
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class LoggingMiddleware:
    """Logs every request and records its duration."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_logging_middleware()

    def add_logging_middleware(self) -> None:
        @self.app.middleware("http")
        async def logging_middleware(request: Request, call_next: Callable) -> Response:
            request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
            request.state.request_id = request_id
            bind_request_context(
                request_id=request_id,
                method=request.method,
                path=request.url.path,
            )

            started = time.perf_counter()
            logger.debug(
                "Request started",
                query_params=str(request.query_params),
                client_host=request.client.host if request.client else None,
            )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "Request failed",
                    error=str(e),
                    duration_ms=round((time.perf_counter() - started) * 1000, 2),
                )
                clear_request_context()
                raise

            elapsed = time.perf_counter() - started
            route = _route_template(request)
            record_api_request(request.method, route, response.status_code, elapsed)

            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                "Request completed",
                route=route,
                status_code=response.status_code,
                duration_ms=round(elapsed * 1000, 2),
            )
            clear_request_context()

            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Process-Time"] = f"{elapsed:.4f}"
            return response
