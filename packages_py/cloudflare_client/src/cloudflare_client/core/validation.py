"""
Argument guards run before any request is built.
"""
from typing import Any, Optional

from ..errors import ArgumentValidationError


def require_not_blank(value: Optional[str], param_name: str) -> str:
    if value is None or not str(value).strip():
        raise ArgumentValidationError(param_name)
    return value


def require_not_none(value: Any, param_name: str) -> Any:
    if value is None:
        raise ArgumentValidationError(param_name, f"'{param_name}' must not be None")
    return value
