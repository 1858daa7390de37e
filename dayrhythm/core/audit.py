"""
Request auditing and response hardening.

AuditMiddleware writes one line per request:

    REQUEST: POST /api/ai/insights status=200 duration=0.812s auth=bearer id=3f9c2a1b

Bodies and bearer tokens are never logged; `auth` only records whether
a bearer header was sent. Each response carries X-Request-ID (echoed
from the client when present) and X-Response-Time.
"""
import logging
import time
import uuid
from typing import Callable, Dict

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from dayrhythm.core.logging_config import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
QUIET_PATHS = frozenset({"/api/health"})

SECURITY_HEADERS: Dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "0",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}


def _level_for(path: str, status_code: int) -> int:
    if path in QUIET_PATHS:
        return logging.DEBUG
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def _auth_scheme(request: Request) -> str:
    header = request.headers.get("authorization", "")
    return "bearer" if header.startswith("Bearer ") else "none"


class AuditMiddleware(BaseHTTPMiddleware):
    """Per-request audit log with timing and a correlation id."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        started = time.perf_counter()
        method = request.method
        path = request.url.path
        auth = _auth_scheme(request)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"REQUEST FAILED: {method} {path} auth={auth} id={request_id} "
                f"duration={time.perf_counter() - started:.3f}s error={e}"
            )
            raise

        duration = time.perf_counter() - started
        logger.log(
            _level_for(path, response.status_code),
            f"REQUEST: {method} {path} status={response.status_code} "
            f"duration={duration:.3f}s auth={auth} id={request_id}",
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds SECURITY_HEADERS to every response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value
        return response
