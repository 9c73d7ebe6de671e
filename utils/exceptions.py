"""
Exception handling
"""
from fastapi import Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from utils.logger import get_logger
from utils.time_utils import now_ms

logger = get_logger("exceptions")

class BusinessError(Exception):
    """Base class for business errors"""
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

class ValidationError(BusinessError):
    """Malformed or missing required input"""
    def __init__(self, message: str):
        super().__init__(message, 422)

class NotFoundError(BusinessError):
    """Referenced record is absent"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, 404)

class ConflictError(BusinessError):
    """Duplicate record"""
    def __init__(self, message: str):
        super().__init__(message, 409)

class ForbiddenError(BusinessError):
    """Caller's role does not allow the operation"""
    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, 403)

class UnauthorizedError(BusinessError):
    """Request carries no usable identity"""
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, 401)

def _error_body(message: str, error_type: str, **extra) -> dict:
    error = {"message": message, "type": error_type}
    error.update(extra)
    return {
        "success": False,
        "error": error,
        "timestamp": now_ms()
    }

async def business_error_handler(request: Request, exc: BusinessError):
    """Business error handler"""
    logger.warning("Business error", error=exc.message, path=request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, type(exc).__name__)
    )

async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Request body / query validation error handler"""
    logger.warning("Invalid request", path=request.url.path)
    return JSONResponse(
        status_code=422,
        content=_error_body("Invalid request data", "ValidationError", details=jsonable_encoder(exc.errors()))
    )

async def http_error_handler(request: Request, exc: HTTPException):
    """HTTP error handler"""
    logger.warning("HTTP error", status=exc.status_code, detail=exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail), "HTTPException")
    )

async def general_error_handler(request: Request, exc: Exception):
    """General error handler"""
    logger.error("Unexpected error", error=str(exc), path=request.url.path, exc_info=True)
    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", "InternalError")
    )
