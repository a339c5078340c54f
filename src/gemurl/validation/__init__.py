"""Input validation utilities."""

from .errors import ValidationError
from .inputs import (
    validate_host_input,
    validate_local_path_input,
    validate_status_code_input,
    validate_url_input,
)

__all__ = [
    "ValidationError",
    "validate_host_input",
    "validate_local_path_input",
    "validate_status_code_input",
    "validate_url_input",
]
