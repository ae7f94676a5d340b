from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from coaching_api.core.exceptions import ServiceError
from coaching_api.schemas.response import ErrorResponse, ErrorDetail, ResultError
from datetime import datetime, timezone
import logging
import uuid

logger = logging.getLogger(__name__)

def _get_error_code(status_code: int) -> str:
    code_map = {
        400: "BAD_REQUEST",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        409: "CONFLICT",
        422: "VALIDATION_ERROR",
        500: "INTERNAL_SERVER_ERROR",
    }
    return code_map.get(status_code, f"HTTP_{status_code}")

def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())

def _error_response(request: Request, request_id: str, status_code: int, detail: ErrorDetail) -> JSONResponse:
    error_response = ErrorResponse(
        error=detail,
        timestamp=datetime.now(timezone.utc).isoformat(),
        path=str(request.url),
        request_id=request_id
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(error_response))

def _log_service_error(request_id: str, exc: ServiceError):
    if exc.status_code >= 500:
        logger.error(f"[{request_id}] {exc.code}: {exc.message}", extra={"request_id": request_id})
    else:
        logger.warning(f"[{request_id}] HTTP {exc.status_code}: {exc.message}", extra={"request_id": request_id})

def result_error_response(request: Request, exc: ServiceError) -> JSONResponse:
    """Render a service error as ``{"error": message}`` for the result routes."""
    _log_service_error(_request_id(request), exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=ResultError(error=exc.message).model_dump()
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    request_id = _request_id(request)
    logger.warning(f"[{request_id}] Validation error: {exc.errors()}", extra={"request_id": request_id})
    return _error_response(request, request_id, 422, ErrorDetail(
        code="VALIDATION_ERROR",
        message="Request validation failed",
        details={"validation_errors": exc.errors()}
    ))

async def service_exception_handler(request: Request, exc: ServiceError):
    request_id = _request_id(request)
    _log_service_error(request_id, exc)
    return _error_response(request, request_id, exc.status_code, ErrorDetail(
        code=exc.code,
        message=exc.message,
        details=exc.details
    ))

async def global_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)

    if isinstance(exc, HTTPException):
        logger.warning(f"[{request_id}] HTTP {exc.status_code}: {exc.detail}", extra={"request_id": request_id})
        return _error_response(request, request_id, exc.status_code, ErrorDetail(
            code=_get_error_code(exc.status_code),
            message=exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        ))

    logger.error(f"[{request_id}] Unhandled exception: {exc}", exc_info=True, extra={"request_id": request_id})
    return _error_response(request, request_id, 500, ErrorDetail(
        code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        details={"error_type": type(exc).__name__}
    ))
