"""
Logging middleware
"""
import time
import uuid
from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from utils.logger import get_logger

logger = get_logger(__name__)

class LoggingMiddleware(BaseHTTPMiddleware):
    """Request logging middleware"""
    
    async def dispatch(self, request: Request, call_next):
        # Reuse the caller's request id when present
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        start_time = time.time()
        
        logger.info(
            "Request started",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            user_id=request.headers.get("x-user-id"),
            client_ip=request.client.host if request.client else None
        )
        request.state.request_id = request_id
        
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request failed",
                request_id=request_id,
                error=str(exc),
                process_time=f"{time.time() - start_time:.3f}s",
                exc_info=True
            )
            raise
        
        logger.info(
            "Request completed",
            request_id=request_id,
            status_code=response.status_code,
            process_time=f"{time.time() - start_time:.3f}s"
        )
        response.headers["X-Request-ID"] = request_id
        return response

def add_logging_middleware(app: FastAPI):
    """Add logging middleware"""
    app.add_middleware(LoggingMiddleware)
