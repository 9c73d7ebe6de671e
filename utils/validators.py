"""
Validation tools
"""
from typing import Any, Dict, Iterable
from utils.exceptions import ValidationError

def validate_not_empty(value: str, field_name: str = "Field"):
    """Validate non-empty"""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} cannot be empty")

def validate_max_length(value: str, max_length: int, field_name: str = "Field"):
    """Validate maximum length"""
    if len(value) > max_length:
        raise ValidationError(f"{field_name} length cannot exceed {max_length} characters")

def validate_message_content(content: str, max_length: int):
    """Validate direct message content"""
    if not isinstance(content, str):
        raise ValidationError("Message content must be a string")
    validate_not_empty(content, "Message content")
    validate_max_length(content, max_length, "Message content")

def validate_required_fields(fields: Dict[str, Any], required: Iterable[str]):
    """Every required field must be present and non-empty"""
    missing = []
    for name in required:
        value = fields.get(name)
        if value is None or (isinstance(value, (str, list, tuple, set)) and not value):
            missing.append(name)
        elif isinstance(value, str) and not value.strip():
            missing.append(name)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")
