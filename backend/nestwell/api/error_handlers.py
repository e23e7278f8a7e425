"""Error Handlers — global exception handlers for the Nestwell API.

Invariants:
    - NestwellError -> its own http_status and to_response() envelope
    - CodecError is logged at ERROR with the corrupt column (data-integrity signal)
    - RequestValidationError (path params, framework-level parsing) -> the same 400
      envelope as RequestValidationFailedError
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (NestwellError), validation (Pydantic), catch-all (Exception)
    - Dispatch on exception type only; messages are for humans
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from nestwell.core.errors import (
    CodecError, ErrorSeverity, NestwellError, RequestValidationFailedError,
)
from nestwell.core.validator import translate_errors

logger = logging.getLogger(__name__)

# FastAPI prefixes locs with where the value came from; the client sees field paths only
_LOCATION_SEGMENTS = ("body", "query", "path", "header", "cookie")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_nestwell_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_nestwell_error_handler(app: FastAPI) -> None:

    @app.exception_handler(NestwellError)
    async def nestwell_error_handler(request: Request, exc: NestwellError):
        """Handle all Nestwell domain/infrastructure errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if isinstance(exc, CodecError):
            extra.update(column=exc.column, entity=exc.context.entity)
            logger.error(f"Data integrity: {exc.message}", extra=extra)
        elif exc.http_status >= 500:
            logger.error(f"NestwellError: {exc.message}", extra=extra)
        else:
            logger.warning(f"NestwellError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Re-express framework validation errors in the domain envelope."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        error = RequestValidationFailedError(
            [e.to_dict() for e in translate_errors(_strip_locations(exc.errors()))],
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _strip_locations(errors) -> list[dict]:
    stripped = []
    for e in errors:
        loc = tuple(e["loc"])
        if loc and loc[0] in _LOCATION_SEGMENTS:
            loc = loc[1:]
        stripped.append({**e, "loc": loc})
    return stripped
