"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    DomainException,
    AmountExceedsCreditException,
    InvalidLoanQuoteRequestException,
    InvalidWalletException,
    MerchantInactiveException,
    MerchantNotFoundException,
    OracleUnavailableException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def _domain_error_response(status_code: int, exc: DomainException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={**exc.to_dict(), "request_id": get_request_id()},
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return "; ".join(parts) or "Invalid request"


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed request bodies, headers and parameters."""
        return _error_response(400, "VALIDATION_ERROR", _format_validation_errors(exc))

    @app.exception_handler(InvalidWalletException)
    async def invalid_wallet_handler(
        request: Request,
        exc: InvalidWalletException,
    ) -> JSONResponse:
        """Handle missing or malformed wallet addresses."""
        return _domain_error_response(400, exc)

    @app.exception_handler(InvalidLoanQuoteRequestException)
    async def invalid_quote_request_handler(
        request: Request,
        exc: InvalidLoanQuoteRequestException,
    ) -> JSONResponse:
        """Handle quote requests outside the accepted bounds."""
        return _domain_error_response(400, exc)

    @app.exception_handler(MerchantNotFoundException)
    async def merchant_not_found_handler(
        request: Request,
        exc: MerchantNotFoundException,
    ) -> JSONResponse:
        """Handle merchant not found errors."""
        return _domain_error_response(404, exc)

    @app.exception_handler(MerchantInactiveException)
    async def merchant_inactive_handler(
        request: Request,
        exc: MerchantInactiveException,
    ) -> JSONResponse:
        """Handle quotes against merchants that stopped accepting loans."""
        return _domain_error_response(400, exc)

    @app.exception_handler(AmountExceedsCreditException)
    async def amount_exceeds_credit_handler(
        request: Request,
        exc: AmountExceedsCreditException,
    ) -> JSONResponse:
        """Handle purchases above the borrower's credit ceiling."""
        return _domain_error_response(400, exc)

    @app.exception_handler(OracleUnavailableException)
    async def oracle_unavailable_handler(
        request: Request,
        exc: OracleUnavailableException,
    ) -> JSONResponse:
        """Handle scoring oracle outages."""
        logger.error(
            "oracle_unavailable",
            request_id=get_request_id(),
            wallet=exc.wallet,
            message=exc.message,
        )
        return _error_response(
            503,
            exc.code,
            "Reputation service temporarily unavailable. Please try again.",
        )

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
        return _domain_error_response(400, exc)

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
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
