"""
Error handling middleware
"""
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from utils.exceptions import (
    BusinessError,
    business_error_handler,
    request_validation_error_handler,
    http_error_handler,
    general_error_handler
)

def add_error_handlers(app: FastAPI):
    """Add error handlers"""
    
    # Business errors: validation, not found, conflict, forbidden, unauthorized
    app.add_exception_handler(BusinessError, business_error_handler)
    
    # Request body / query parsing errors
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    
    # HTTP error handling
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    
    # General error handling
    app.add_exception_handler(Exception, general_error_handler)
