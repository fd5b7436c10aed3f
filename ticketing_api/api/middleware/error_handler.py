"""
Error Handler Middleware

Global exception handling for the API.

Every failure leaves the API in the same envelope as a success, with
`data` null:

    {
        "data": null,
        "errors": {
            "code": "NOT_FOUND",
            "message": "Venue with id '12' not found",
            "details": null
        }
    }

Exception Handling:
===================
1. TicketingException subclasses → their status_code and to_dict()
2. Request validation (body, path, query) → 400 VALIDATION_ERROR
3. Starlette HTTPException (unknown route, wrong method) → its status code
4. Anything else → 500 INTERNAL_ERROR (details logged, not exposed)

Usage:
======
    from ticketing_api.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ticketing_api.shared.core.exceptions import TicketingException
from ticketing_api.shared.core.logging import logger


def error_envelope(code: str, message: str, details: Optional[dict[str, Any]] = None) -> dict:
    return {"data": None, "errors": {"code": code, "message": message, "details": details}}


def _summarize(errors: Sequence[Any]) -> list[dict[str, Any]]:
    # ctx may hold exception objects that aren't JSON serializable
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in errors
    ]


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(TicketingException)
    async def ticketing_exception_handler(
        request: Request,
        exc: TicketingException,
    ) -> JSONResponse:
        """Handle domain exceptions raised by services, repositories and dependencies."""
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError | ValidationError,
    ) -> JSONResponse:
        """Handle malformed requests and schema violations."""
        errors = _summarize(exc.errors())
        logger.warning(
            "Validation error",
            errors=errors,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content=error_envelope(
                "VALIDATION_ERROR",
                "Request validation failed",
                {"errors": errors},
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope("HTTP_ERROR", str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=error_envelope("INTERNAL_ERROR", "An unexpected error occurred"),
        )
