"""
Utils Package
"""
from .logger import get_logger
from .time_utils import now, now_ms
from .validators import validate_message_content, validate_required_fields
from .response_utils import success_response
from .exceptions import (
    BusinessError,
    ValidationError,
    NotFoundError,
    ConflictError,
    ForbiddenError,
    UnauthorizedError,
)
from .security import hash_password, verify_password

__all__ = [
    # Logging
    "get_logger",
    
    # Time
    "now",
    "now_ms",
    
    # Validation
    "validate_message_content",
    "validate_required_fields",
    
    # Response
    "success_response",
    
    # Exceptions
    "BusinessError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ForbiddenError",
    "UnauthorizedError",
    
    # Passwords
    "hash_password",
    "verify_password",
]
