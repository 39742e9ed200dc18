"""
Request Tracking Middleware
Logs every API request with timing, response code and caller
"""
import time
import uuid
from typing import Dict
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from app.core.logging_config import get_logger

logger = get_logger(__name__)

SLOW_REQUEST_SECONDS = 1.0


class RequestTracker:
    """Running counters for the requests served by this process"""

    def __init__(self):
        self.stats = {
            "total_requests": 0,
            "total_errors": 0,
            "total_response_time": 0.0,
        }

    def log_request(
        self,
        request: Request,
        response: Response,
        response_time: float,
        request_id: str
    ):
        """Log request with details"""
        username = None
        if hasattr(request.state, "user"):
            username = request.state.user.get("sub")

        self.stats["total_requests"] += 1
        self.stats["total_response_time"] += response_time
        if response.status_code >= 400:
            self.stats["total_errors"] += 1

        logger.info(
            f"[Request] {request.method} {request.url.path} -> {response.status_code} "
            f"| {response_time * 1000:.2f}ms request_id={request_id} user={username}"
        )

        if response_time > SLOW_REQUEST_SECONDS:
            logger.warning(
                f"SLOW REQUEST: {request.method} {request.url.path} - "
                f"{response_time*1000:.0f}ms - Status: {response.status_code}"
            )

    def get_request_stats(self) -> Dict:
        total = self.stats["total_requests"]
        errors = self.stats["total_errors"]
        avg_time = self.stats["total_response_time"] / total * 1000 if total > 0 else 0
        return {
            "total_requests": total,
            "total_errors": errors,
            "error_rate": round((errors / total * 100), 2) if total > 0 else 0,
            "avg_response_time_ms": round(avg_time, 2),
        }


# Global request tracker instance
request_tracker = RequestTracker()


class RequestTrackingMiddleware(BaseHTTPMiddleware):
    """Middleware to track all requests"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception:
            response_time = time.time() - start_time
            error_response = JSONResponse(
                status_code=500,
                content={"detail": "Internal server error"}
            )
            request_tracker.log_request(request, error_response, response_time, request_id)
            raise

        response_time = time.time() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{response_time*1000:.2f}ms"
        request_tracker.log_request(request, response, response_time, request_id)
        return response
