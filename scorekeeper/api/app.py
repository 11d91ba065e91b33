"""FastAPI application factory.

Creates the application, wires the record store into its lifespan and
registers exception handlers and routes.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from scorekeeper.api.exceptions import ScorekeeperAPIError, store_error_response
from scorekeeper.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from scorekeeper.api.routes import register_routes
from scorekeeper.config import Settings, get_settings
from scorekeeper.observability.logging import get_logger, setup_logging
from scorekeeper.records.errors import RecordStoreError
from scorekeeper.records.factory import create_record_store
from scorekeeper.records.store import RecordStore

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    store: RecordStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The record store is created from settings unless one is given. It is
    connected when the application starts (failing startup if the table
    or credentials are unusable) and closed when it shuts down.

    Args:
        settings: Settings to use instead of the cached global settings
        store: Store to use instead of building one from settings

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(
            level=settings.log_level,
            format=settings.observability.log_format,
            redact_secrets=settings.observability.redact_pii,
        )
        record_store = store or create_record_store(settings.storage.records)
        await record_store.connect()
        app.state.record_store = record_store
        logger.info("app_started", backend=record_store.backend)
        try:
            yield
        finally:
            await record_store.close()
            logger.info("app_stopped")

    app = FastAPI(
        title=settings.api.title,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    _register_exception_handlers(app)
    register_routes(app, metrics_enabled=settings.observability.metrics_enabled)

    logger.debug("app_created", debug=settings.debug)
    return app


def _error_response(status_code: int, body: ErrorBody) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=body).model_dump(mode="json", exclude_none=True),
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(ScorekeeperAPIError)
    async def api_error_handler(
        request: Request, exc: ScorekeeperAPIError
    ) -> JSONResponse:
        logger.info(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )
        return _error_response(
            exc.status_code,
            ErrorBody(code=exc.error_code, message=exc.message),
        )

    @app.exception_handler(RecordStoreError)
    async def store_error_handler(
        request: Request, exc: RecordStoreError
    ) -> JSONResponse:
        status_code, error_code = store_error_response(exc)
        log = logger.error if status_code >= 500 else logger.warning
        log(
            "record_store_error",
            error_code=error_code.value,
            error_type=type(exc).__name__,
            operation=exc.operation,
            backend_code=exc.code,
            message=exc.message,
            path=request.url.path,
        )
        return _error_response(
            status_code,
            ErrorBody(code=error_code, message=exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning(
            "validation_error",
            errors=exc.errors(),
            path=request.url.path,
        )
        details = [
            ErrorDetail(
                field=".".join(str(loc) for loc in error["loc"]),
                message=error["msg"],
            )
            for error in exc.errors()
        ]
        return _error_response(
            400,
            ErrorBody(
                code=ErrorCode.INVALID_REQUEST,
                message="Request validation failed",
                details=details,
            ),
        )
