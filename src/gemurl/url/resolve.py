"""Resolving references against a base URL.

Follows the RFC 3986 reference-resolution outline with gemini defaults: a
reference without a scheme inherits the base scheme (or "gemini"), hosts are
shown in Unicode form, the default gemini port is dropped and the result
path never contains dot-segments.
"""

import unicodedata
from urllib.parse import unquote

from ..logging_config import get_logger
from .codec import DEFAULT_PORT, DEFAULT_SCHEME
from .decompose import decompose
from .hostname import decode_host
from .paths import normalize_url_path

logger = get_logger("url.resolve")

# Schemes whose body is not a hierarchical path
OPAQUE_SCHEMES = frozenset({"data", "about", "mailto"})


def _directory(path: str) -> str:
    """Everything up to, not including, the last "/" of path.

    A path without any "/" is returned whole.
    """
    slash = path.rfind("/")
    if slash < 0:
        return path
    return path[:slash]


def _is_absolute_path(path: str) -> bool:
    return unquote(path).startswith("/")


def resolve(base: str, reference: str) -> str:
    """Resolve reference against the absolute URL base.

    Never fails; any input produces some absolute URL. References using
    data:, about: or mailto: are returned unchanged.

    Note that the query always comes from the reference: resolving an empty
    reference keeps the base path but drops the base query.

    Args:
        base: Absolute URL of the current document
        reference: Absolute URL or relative reference (e.g. a link target)

    Returns:
        Normalized absolute URL

    Example:
        >>> resolve("gemini://example.org/a/b/c", "d/e")
        'gemini://example.org/a/b/d/e'
        >>> resolve("gemini://example.org/a/b/", "../c")
        'gemini://example.org/a/c'
        >>> resolve("gemini://example.org/", "//other.org:1965/x")
        'gemini://other.org/x'
    """
    orig = decompose(base)
    rel = decompose(reference)

    if rel.scheme_text.lower() in OPAQUE_SCHEMES:
        logger.debug(f"Opaque reference passed through: {rel.scheme_text}")
        return reference

    is_relative = rel.host.is_empty
    if not rel.scheme.is_empty:
        scheme = rel.scheme_text
    elif is_relative and not orig.scheme.is_empty:
        scheme = orig.scheme_text
    else:
        scheme = DEFAULT_SCHEME

    authority = orig if is_relative else rel
    absolute = scheme + "://" + decode_host(authority.host_text)
    port = authority.port_text
    if port and (scheme.lower() != DEFAULT_SCHEME or port != DEFAULT_PORT):
        absolute += ":" + port

    rel_path = rel.path_text
    if not rel.scheme.is_empty or not rel.host.is_empty or _is_absolute_path(rel_path):
        if not rel_path.startswith("/"):
            absolute += "/"
        absolute += rel_path
    elif rel_path:
        orig_path = orig.path_text
        # A base ending in "/" names a directory, otherwise a file in one
        merged = orig_path if orig_path.endswith("/") else _directory(orig_path)
        if not merged.endswith("/"):
            merged += "/"
        absolute += merged + rel_path
    else:
        absolute += orig.path_text

    if rel.has_query:
        absolute += "?" + rel.query_text
    if rel.has_fragment:
        absolute += "#" + rel.fragment_text

    return normalize_url_path(unicodedata.normalize("NFC", absolute))
