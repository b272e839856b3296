"""
Error Handler Middleware

Turns every failure into the same JSON envelope:

    {"error": {"code": "NOT_FOUND", "message": "Book with id '...' not found", "details": {}}}

    BooknotesException            → its own status_code and error_code
    RequestValidationError        → 400 VALIDATION_ERROR, pydantic errors in details
    pydantic.ValidationError      → 400 VALIDATION_ERROR
    anything else                 → 500 INTERNAL_ERROR, logged with traceback,
                                    nothing about the cause is returned

Request id, method and path are already in the logging context, so the
handlers log only what is specific to the error.
"""

from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from booknotes.shared.core.exceptions import BooknotesException, ValidationError
from booknotes.shared.core.logging import get_logger


logger = get_logger(__name__)


def _error_response(exc: BooknotesException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _validation_response(errors: Sequence[Any]) -> JSONResponse:
    encoded = jsonable_encoder(errors)
    logger.info("Request rejected by validation", errors=encoded)
    return _error_response(ValidationError("Request validation failed", details={"errors": encoded}))


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the handlers on ``app``."""

    @app.exception_handler(BooknotesException)
    async def booknotes_exception_handler(_request: Request, exc: BooknotesException) -> JSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.info
        log("Request failed", error_code=exc.error_code, status_code=exc.status_code, message=exc.message)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        return _validation_response(exc.errors())

    @app.exception_handler(PydanticValidationError)
    async def pydantic_validation_handler(_request: Request, exc: PydanticValidationError) -> JSONResponse:
        return _validation_response(exc.errors())

    @app.exception_handler(Exception)
    async def unexpected_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception", error_type=type(exc).__name__, exc_info=exc)
        return _error_response(BooknotesException("An unexpected error occurred"))
