"""
Response Tools
"""
from typing import Any, Dict
from utils.time_utils import now_ms

def success_response(data: Any = None, message: str = "Operation successful") -> Dict[str, Any]:
    """Success response"""
    return {
        "success": True,
        "message": message,
        "data": data,
        "timestamp": now_ms()
    }
