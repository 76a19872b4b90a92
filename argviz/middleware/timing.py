"""
Request Timing Middleware

Solving is CPU-bound and, for complete/preferred/stable semantics,
exponential in the worst case. Every request is logged with its latency
and the latency is echoed back in X-Process-Time-Ms so clients can spot
frameworks that approach the search budget.
"""

from __future__ import annotations

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("argviz.timing")

QUIET_PATHS = {"/v1/health", "/docs", "/openapi.json", "/redoc"}


class RequestTimer(BaseHTTPMiddleware):

    def __init__(self, app, slow_ms: float = 1000.0):
        super().__init__(app)
        self.slow_ms = slow_ms

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers["X-Process-Time-Ms"] = f"{elapsed_ms:.2f}"

        if request.url.path in QUIET_PATHS:
            return response

        if elapsed_ms >= self.slow_ms:
            logger.warning(
                f"SLOW | {request.method} {request.url.path} | "
                f"{response.status_code} | {elapsed_ms:.1f}ms"
            )
        else:
            logger.info(
                f"{request.method} {request.url.path} | "
                f"{response.status_code} | {elapsed_ms:.1f}ms"
            )
        return response
