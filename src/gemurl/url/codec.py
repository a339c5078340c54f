"""Percent-encoding helpers and small URL rewrites.

Handles path-scoped percent-encoding, default-port removal, fragment removal
and conversion of local filesystem paths into file:// URLs.
"""

import os
import re
import sys
from pathlib import Path
from urllib.parse import quote, unquote_to_bytes

from .decompose import FILE_PREFIX, decompose

DEFAULT_SCHEME = "gemini"
DEFAULT_PORT = "1965"

# Escapes of "%", "?", "/" and "#" stay escaped when decoding a path
_RESERVED_ESCAPE = re.compile(r"(%(?:25|3f|2f|23))", re.IGNORECASE)

# A run of consecutive escapes, decoded together so multi-byte UTF-8 works
_ESCAPE_RUN = re.compile(r"(?:%[0-9a-f]{2})+", re.IGNORECASE)


def _unquote_run(match: re.Match[str]) -> str:
    escapes = match.group()
    try:
        return unquote_to_bytes(escapes).decode("utf-8")
    except UnicodeDecodeError:
        return escapes


def _unquote(text: str) -> str:
    """Percent-decode text, leaving escape runs that are not UTF-8 encoded."""
    return _ESCAPE_RUN.sub(_unquote_run, text)


def decode_path(url: str) -> str:
    """Percent-decode the path of url.

    Escaped "%", "?", "/" and "#" are left as they are, so decoding never
    introduces new delimiters into the path. Escapes that do not form valid
    UTF-8 are left encoded too.

    Example:
        >>> decode_path("gemini://example.org/a%20b%2Fc?x%20y")
        'gemini://example.org/a b%2Fc?x%20y'
    """
    view = decompose(url)
    if view.path.is_empty:
        return url
    pieces = _RESERVED_ESCAPE.split(view.path_text)
    # Odd indices hold the captured reserved escapes
    decoded = "".join(
        piece if index % 2 else _unquote(piece) for index, piece in enumerate(pieces)
    )
    return view.splice(view.path, decoded)


def encode_path(url: str) -> str:
    """Percent-encode the path of url.

    "%", "/" and spaces are not escaped; spaces are left for
    encode_spaces().

    Example:
        >>> encode_path("gemini://example.org/ä b/%41")
        'gemini://example.org/%C3%A4 b/%41'
    """
    view = decompose(url)
    if view.path.is_empty:
        return url
    return view.splice(view.path, quote(view.path_text, safe="%/ "))


def encode_spaces(text: str) -> str:
    """Replace every space in text with "%20"."""
    return text.replace(" ", "%20")


def strip_default_port(url: str) -> str:
    """Remove ":1965" from a gemini URL.

    Other schemes and other ports are left untouched.

    Example:
        >>> strip_default_port("gemini://example.org:1965/x")
        'gemini://example.org/x'
        >>> strip_default_port("gemini://example.org:1966/x")
        'gemini://example.org:1966/x'
    """
    view = decompose(url)
    if view.scheme_text.lower() == DEFAULT_SCHEME and view.port_text == DEFAULT_PORT:
        # The port is always preceded by a colon
        return url[:view.port.start - 1] + url[view.port.end:]
    return url


def fragment_stripped(url: str) -> str:
    """Return url without its "#fragment" part."""
    return url.partition("#")[0]


def make_file_url(local_path: str | Path) -> str:
    """Convert a local filesystem path to a file:// URL.

    Handles platform differences:
    - Unix: file:///path/to/file
    - Windows: file:///C:/path/to/file

    The path is cleaned lexically (no filesystem access), backslashes become
    forward slashes and everything except "/" and ":" is percent-encoded.

    Args:
        local_path: Filesystem path to convert

    Returns:
        file:// URL string

    Example:
        >>> make_file_url("/tmp/my notes/./a.gmi")
        'file:///tmp/my%20notes/a.gmi'
        >>> make_file_url("")
        'file://'
    """
    if not str(local_path):
        return FILE_PREFIX
    path = os.path.normpath(str(local_path)).replace("\\", "/")
    encoded = quote(path, safe="/:")
    if sys.platform == "win32":
        # Three slashes before the drive letter
        encoded = "/" + encoded
    return FILE_PREFIX + encoded
