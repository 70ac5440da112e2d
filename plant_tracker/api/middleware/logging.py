# 📄 File: plant_tracker/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a short diary line for every request to the plant tracker: what was asked, the answer
# code and how long it took, tagged with an id so related log lines can be found together.
# 🧪 Purpose (Technical Summary):
# Request logging middleware binding a request id to the logging context for the duration of the
# request, timing the response and echoing the id in the X-Request-ID header.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, plant_tracker.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# plant_tracker.main (middleware registration)

import time
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from plant_tracker.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware

    Features:
    - Request id taken from X-Request-ID or generated
    - Request id available to every log line of the request
    - Status code and timing of each response
    - Slow requests logged as warnings
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        with log_context(request_id=request_id):
            start_time = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"{request.method} {request.url.path} failed: {e}",
                    exc_info=True,
                    method=request.method,
                    path=request.url.path,
                )
                raise

            processing_time = time.perf_counter() - start_time
            fields = {
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "processing_time_ms": round(processing_time * 1000, 2),
            }
            message = f"{request.method} {request.url.path} -> {response.status_code}"
            if processing_time > self.slow_request_threshold:
                logger.warning(f"Slow request: {message}", **fields)
            else:
                logger.info(message, **fields)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
