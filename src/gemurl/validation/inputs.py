"""Input validation for MCP tool parameters."""

import re
from typing import Any

from .errors import ValidationError

_HOST_FORBIDDEN = re.compile(r"[/\s]")


def validate_url_input(
    field: str,
    value: Any,
    *,
    max_length: int,
    allow_empty: bool = False,
) -> str:
    """Validate a URL or reference parameter.

    Args:
        field: Parameter name, used in error messages
        value: Value passed by the client
        max_length: Longest accepted value
        allow_empty: Whether "" is acceptable (e.g. an empty reference)

    Returns:
        The value, unchanged

    Raises:
        ValidationError: If value is missing, not a string, empty or too long
    """
    if value is None:
        raise ValidationError(field, f"{field} parameter is required")
    if not isinstance(value, str):
        raise ValidationError(field, f"{field} must be a string, got {type(value).__name__}")
    if not allow_empty and not value.strip():
        raise ValidationError(field, f"{field} parameter cannot be empty")
    if len(value) > max_length:
        raise ValidationError(
            field, f"{field} is {len(value)} characters long, limit is {max_length}"
        )
    return value


def validate_host_input(value: Any, *, max_length: int) -> str:
    """Validate a bare host name parameter.

    Raises:
        ValidationError: If the host is missing, empty, too long or contains
            a slash or whitespace
    """
    host = validate_url_input("host", value, max_length=max_length)
    if _HOST_FORBIDDEN.search(host):
        raise ValidationError("host", f"host must not contain '/' or whitespace: {host!r}")
    return host


def validate_local_path_input(value: Any, *, max_length: int) -> str:
    """Validate a local filesystem path parameter.

    The path does not have to exist.
    """
    return validate_url_input("path", value, max_length=max_length)


def validate_status_code_input(value: Any) -> int:
    """Validate a status code parameter.

    Raises:
        ValidationError: If code is missing or not an integer
    """
    if value is None:
        raise ValidationError("code", "code parameter is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("code", f"code must be an integer, got {type(value).__name__}")
    return value
