"""Exception handlers that turn domain errors into user-facing notices."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from finyx.application.services.dashboard_session import RELOAD_PATH
from finyx.domain.exceptions import (
    DashboardBusyException,
    DomainException,
    InvalidRecordException,
    StoreException,
    StoreNotConfiguredException,
    StoreTimeoutException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(
    status_code: int,
    exc: DomainException,
    title: str,
    message: str | None = None,
    **extra,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "title": title,
            "message": message or exc.message,
            "request_id": get_request_id(),
            **extra,
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(InvalidRecordException)
    async def invalid_record_handler(
        request: Request,
        exc: InvalidRecordException,
    ) -> JSONResponse:
        """Handle validation errors on submitted records."""
        return _error_response(400, exc, "Dados inválidos", errors=exc.errors)

    @app.exception_handler(DashboardBusyException)
    async def dashboard_busy_handler(
        request: Request,
        exc: DashboardBusyException,
    ) -> JSONResponse:
        """Handle mutations attempted while transactions load."""
        return _error_response(409, exc, "Aguarde o carregamento")

    @app.exception_handler(StoreNotConfiguredException)
    async def store_not_configured_handler(
        request: Request,
        exc: StoreNotConfiguredException,
    ) -> JSONResponse:
        """Handle missing store credentials."""
        logger.error(
            "store_not_configured",
            request_id=get_request_id(),
            required=exc.required,
        )
        return _error_response(
            503,
            exc,
            "Banco de dados não configurado",
            required_variables=exc.required,
            retry_path=RELOAD_PATH,
        )

    @app.exception_handler(StoreTimeoutException)
    async def store_timeout_handler(
        request: Request,
        exc: StoreTimeoutException,
    ) -> JSONResponse:
        """Handle store timeouts."""
        logger.error(
            "store_timeout",
            request_id=get_request_id(),
        )
        return _error_response(503, exc, "Banco de dados indisponível")

    @app.exception_handler(StoreException)
    async def store_error_handler(
        request: Request,
        exc: StoreException,
    ) -> JSONResponse:
        """Handle store errors."""
        logger.error(
            "store_error",
            request_id=get_request_id(),
            message=exc.message,
            status_code=exc.status_code,
        )
        return _error_response(503, exc, "Erro no banco de dados")

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc, "Erro")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "title": "Erro inesperado",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
