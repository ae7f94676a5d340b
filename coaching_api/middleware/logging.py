import logging
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
QUIET_PATHS = {"/health"}

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id and log method, path, status and duration.

    A client-supplied ``X-Request-ID`` is reused so a submission can be traced
    from the frontend; otherwise a new one is generated. Health checks log at
    DEBUG only.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        path = request.url.path
        extra = {"request_id": request_id, "method": request.method, "path": path}

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            extra["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            logger.error(f"[{request_id}] {request.method} {path} - ERROR: {exc}", extra=extra)
            raise

        extra["status_code"] = response.status_code
        extra["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
        if path in QUIET_PATHS:
            level = logging.DEBUG
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(level, f"[{request_id}] {request.method} {path} - {response.status_code} ({extra['duration_ms']}ms)", extra=extra)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
