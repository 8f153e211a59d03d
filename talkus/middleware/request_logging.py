from fastapi import Request
import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("talkus")

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request and reports its processing time in X-Process-Time"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        logger.info(f"Request: {request.method} {target}")
        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        logger.info(f"Response: {request.method} {target} -> {response.status_code} in {process_time:.4f}s")

        return response
