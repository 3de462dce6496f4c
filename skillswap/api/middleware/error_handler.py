"""
Error handling middleware.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from skillswap.config.logging import get_logger
from skillswap.domain.exceptions.conflict_error import ConflictError
from skillswap.domain.exceptions.not_found_error import NotFoundError
from skillswap.domain.exceptions.store_error import StoreError
from skillswap.domain.exceptions.validation_error import ValidationError
from skillswap.infrastructure.monitoring.metrics import record_error

logger = get_logger(__name__)


class ErrorHandlerMiddleware:
    """Error handling middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        add_error_handlers(self.app)


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        record_error("validation_error")
        return JSONResponse(status_code=400, content={"message": str(exc)})

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError):
        logger.info("Record not found", error=str(exc), path=request.url.path)
        record_error("not_found")
        return JSONResponse(status_code=404, content={"message": str(exc)})

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(request: Request, exc: ConflictError):
        logger.info("Conflicting write rejected", error=str(exc), path=request.url.path)
        record_error("conflict")
        return JSONResponse(status_code=400, content={"message": str(exc)})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error("Store error", error=str(exc), path=request.url.path)
        record_error("store_error")
        return JSONResponse(
            status_code=500, content={"message": "A database error occurred"}
        )

    @app.exception_handler(PyMongoError)
    async def database_error_handler(request: Request, exc: PyMongoError):
        logger.error("Database error", error=str(exc), path=request.url.path)
        record_error("store_error")
        return JSONResponse(
            status_code=500, content={"message": "A database error occurred"}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        record_error("internal_error")
        return JSONResponse(
            status_code=500,
            content={"message": "An unexpected error occurred"},
        )
