"""
HTTP request/response logging middleware.

Every request gets a request id (taken from an incoming ``X-Request-ID``
header or generated), which is bound to a ContextVar for the duration of
the request and echoed back on the response.
"""
import time
import uuid
import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .logging_config import request_id_var

logger = logging.getLogger("servicedesk.middleware")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and one per response, tagged with the request id."""

    # Not logged, still tagged
    SKIP_PATHS = frozenset({"/health", "/openapi.json", "/docs", "/redoc", "/favicon.ico"})

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        req_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        token = request_id_var.set(req_id)
        try:
            if request.url.path in self.SKIP_PATHS:
                response = await call_next(request)
            else:
                response = await self._logged_call(request, call_next)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = req_id
        return response

    async def _logged_call(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        method = request.method
        path = request.url.path
        query = request.url.query
        full_path = f"{path}?{query}" if query else path
        client_ip = request.client.host if request.client else "unknown"

        logger.info(f"→ {method} {full_path}", extra={"method": method, "path": path, "client_ip": client_ip})
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = round((time.perf_counter() - start_time) * 1000)
            logger.error(
                f"✗ {method} {full_path} {duration_ms}ms — {type(exc).__name__}: {exc}",
                extra={"method": method, "path": path, "duration_ms": duration_ms, "status_code": 500},
                exc_info=True,
            )
            raise

        duration_ms = round((time.perf_counter() - start_time) * 1000)
        status = response.status_code

        if status >= 500:
            log_fn = logger.error
        elif status >= 400:
            log_fn = logger.warning
        else:
            log_fn = logger.info

        log_fn(
            f"← {status} {method} {full_path} {duration_ms}ms",
            extra={
                "method": method, "path": path, "status_code": status,
                "duration_ms": duration_ms, "client_ip": client_ip,
            }
        )
        return response
