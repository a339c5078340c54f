"""URL parsing, reference resolution and host transcoding."""

from .codec import (
    DEFAULT_PORT,
    DEFAULT_SCHEME,
    decode_path,
    encode_path,
    encode_spaces,
    fragment_stripped,
    make_file_url,
    strip_default_port,
)
from .decompose import FILE_PREFIX, decompose, url_host, url_scheme
from .hostname import ACE_PREFIX, decode_host, encode_host, encode_url_host
from .paths import normalize_path, normalize_url_path
from .resolve import OPAQUE_SCHEMES, resolve
from .view import EMPTY_SPAN, Span, UrlView

__all__ = [
    "ACE_PREFIX",
    "DEFAULT_PORT",
    "DEFAULT_SCHEME",
    "EMPTY_SPAN",
    "FILE_PREFIX",
    "OPAQUE_SCHEMES",
    "Span",
    "UrlView",
    "decode_host",
    "decode_path",
    "decompose",
    "encode_host",
    "encode_path",
    "encode_spaces",
    "encode_url_host",
    "fragment_stripped",
    "make_file_url",
    "normalize_path",
    "normalize_url_path",
    "resolve",
    "strip_default_port",
    "url_host",
    "url_scheme",
]
