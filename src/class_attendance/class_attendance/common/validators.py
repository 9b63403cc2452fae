from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_str(data: dict, field_name: str) -> str:
    value = data.get(field_name)
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} is required")
    return value


def optional_str(data: dict, field_name: str) -> Optional[str]:
    """Absent key means no value; an explicit null is rejected like any non-string."""
    if field_name not in data:
        return None
    value = data[field_name]
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_length(value: str, field_name: str, *, min_len: int = 0, max_len: Optional[int] = None) -> str:
    if len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    if max_len is not None and len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def require_email(value: str, field_name: str = "email") -> str:
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} is not a valid email address")
    return value


def require_int(data: dict, field_name: str) -> int:
    value: Any = data.get(field_name)
    # bool is an int subclass; JSON true/false is never an id
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")
    return value


def require_bool(data: dict, field_name: str) -> bool:
    value = data.get(field_name)
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a boolean")
    return value


def require_payload(data: Any) -> dict:
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
