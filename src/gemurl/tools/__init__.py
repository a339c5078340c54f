"""MCP tool implementations."""

from .files import make_file_url
from .health_check import health_check
from .hosts import decode_host, encode_host
from .parse import normalize_url, parse_url
from .resolve import resolve_url
from .status import describe_status

__all__ = [
    "decode_host",
    "describe_status",
    "encode_host",
    "health_check",
    "make_file_url",
    "normalize_url",
    "parse_url",
    "resolve_url",
]
