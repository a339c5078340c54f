"""Splitting URL text into component spans.

Both matchers are compiled once at import time and are read-only afterwards,
so decompose() is safe to call from any number of threads.
"""

import re

from .view import EMPTY_SPAN, Span, UrlView

FILE_PREFIX = "file://"

# (scheme ":")? ("//" authority)? path ("?" query)? ("#" fragment)?
_URL_PATTERN = re.compile(
    r"^(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?",
    re.IGNORECASE | re.DOTALL,
)

# (user "@")? (host | "[" ipv6 "]") (":" port)?
_AUTHORITY_PATTERN = re.compile(
    r"(([^@]+)@)?(([^:\[\]]+)|(\[[0-9a-f:]+\]))(:([0-9]+))?",
    re.IGNORECASE,
)


def _group_span(match: re.Match[str], group: int) -> Span:
    start, end = match.span(group)
    if start < 0:
        return EMPTY_SPAN
    return Span(start, end)


def decompose(text: str) -> UrlView:
    """Split a URL or relative reference into its components.

    Never fails: text that does not look like a URL simply yields a view with
    most components absent. User info in the authority is parsed but not
    exposed.

    Args:
        text: Absolute URL or relative reference

    Returns:
        UrlView with spans into text

    Example:
        >>> view = decompose("gemini://user@example.org:1966/a/b?q#top")
        >>> view.host_text, view.port_text, view.path_text
        ('example.org', '1966', '/a/b')
        >>> decompose("file:///tmp/a.txt").path_text
        '/tmp/a.txt'
    """
    # "file://" only carries a path
    if text[:len(FILE_PREFIX)].lower() == FILE_PREFIX:
        return UrlView(
            source=text,
            scheme=Span(0, len("file")),
            path=Span(len(FILE_PREFIX), len(text)),
        )

    match = _URL_PATTERN.match(text)
    if match is None:
        return UrlView(source=text)

    host = _group_span(match, 4)
    port = EMPTY_SPAN
    if not host.is_empty:
        auth = _AUTHORITY_PATTERN.search(text, host.start, host.end)
        if auth is not None:
            host = _group_span(auth, 3)
            port = _group_span(auth, 7)

    return UrlView(
        source=text,
        scheme=_group_span(match, 2),
        host=host,
        port=port,
        path=_group_span(match, 5),
        query=_group_span(match, 7),
        fragment=_group_span(match, 9),
    )


def url_scheme(url: str) -> str:
    """Return the scheme of url, or "" if it has none."""
    return decompose(url).scheme_text


def url_host(url: str) -> str:
    """Return the host of url, or "" if it has none."""
    return decompose(url).host_text
