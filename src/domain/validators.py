import uuid
from typing import Any

from src.domain.errors import ValidationError


def is_valid_id(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def require_valid_id(value: Any, name: str) -> str:
    if not is_valid_id(value):
        raise ValidationError(f"{name} is invalid")
    return value


def is_filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())
