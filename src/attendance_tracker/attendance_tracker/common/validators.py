from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import is_in_future


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} cannot be empty")
    return value


def require_id(value: Optional[str], entity: str) -> str:
    if value is None:
        raise ValidationError(f"{entity} ID cannot be null")
    if not value:
        raise ValidationError(f"{entity} ID cannot be empty")
    return value


def require_positive(value: int, field_name: str) -> int:
    if value is None or int(value) <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return int(value)


def require_not_in_future(value: datetime, now: datetime, field_name: str) -> datetime:
    if is_in_future(value, now):
        raise ValidationError(f"{field_name} cannot be in the future")
    return value
