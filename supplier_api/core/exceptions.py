"""Application-level exceptions and FastAPI exception handlers."""


import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class NotFoundError(AppException):
    def __init__(self, message: str = "User not found"):
        super().__init__(message, status_code=404, code="NOT_FOUND")

class InputError(AppException):
    """Request body has the wrong shape (e.g. an empty id list)."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400, code="INPUT_ERROR")

class RecordValidationError(AppException):
    """One or more field-level rule violations on a candidate record."""

    def __init__(self, message: str, errors: list[dict[str, str]]):
        self.errors = errors
        super().__init__(message, status_code=400, code="VALIDATION_ERROR")

class StoreError(AppException):
    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message, status_code=500, code="STORE_ERROR")

class ReportGenerationError(AppException):
    def __init__(self, message: str = "Error generating report"):
        super().__init__(message, status_code=500, code="REPORT_ERROR")

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str, errors: list[dict[str, str]] | None = None) -> dict:
    body: dict = {"code": code, "message": message}
    if errors is not None:
        body["errors"] = errors
    return body

def _request_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic's error list into ``{field, message}`` entries."""
    errors = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        errors.append({"field": ".".join(loc) or "body", "message": err.get("msg", "Invalid value")})
    return errors

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message, getattr(exc, "errors", None)),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=_error_body("VALIDATION_ERROR", "Invalid request", _request_errors(exc)),
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Store error on %s %s", request.method, request.url.path, exc_info=exc)
        err = StoreError()
        return JSONResponse(
            status_code=err.status_code,
            content=_error_body(err.code, err.message),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("NOT_FOUND", "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
