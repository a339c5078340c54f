"""Dot-segment removal for URL paths."""

from .decompose import decompose


def normalize_path(path: str) -> str:
    """Collapse "." and ".." segments of a URL path.

    Empty segments are dropped, ".." never climbs above the start of the
    path, and a leading or trailing slash on the input is kept on the
    output. Relative paths stay relative.

    Args:
        path: Path component (no query or fragment)

    Returns:
        Cleaned path

    Example:
        >>> normalize_path("/a/./b/../c/")
        '/a/c/'
        >>> normalize_path("/../x")
        '/x'
        >>> normalize_path("a/../../b")
        'b'
    """
    leading_slash = path.startswith("/")
    clean = ""
    for segment in path.split("/"):
        if segment == "..":
            clean = clean[:max(clean.rfind("/"), 0)]
        elif segment == ".":
            continue
        elif segment:
            if clean or leading_slash:
                clean += "/"
            clean += segment
    if path.endswith("/"):
        clean += "/"
    return clean


def normalize_url_path(url: str) -> str:
    """Apply normalize_path() to the path component of a full URL.

    Example:
        >>> normalize_url_path("gemini://example.org/a/b/../c?x=1")
        'gemini://example.org/a/c?x=1'
    """
    view = decompose(url)
    path = view.path_text
    clean = normalize_path(path)
    if clean == path:
        return url
    return view.splice(view.path, clean)
