"""FastMCP server for gemurl.

NOTE: Do NOT initialize logging here at import time.
Logging is initialized in __main__.py to avoid import side effects.

Tools:
- parse_url: Split a URL into its components
- resolve_url: Resolve a link against the current page URL
- normalize_url: Canonical form of an absolute URL
- encode_host / decode_host: Punycode host transcoding
- make_file_url: file:// URL for a local path
- describe_status: Display text for a Gemini status code
- health_check: Server health and configuration
"""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP


def create_mcp_server() -> FastMCP:
    """Create and initialize the MCP server instance.

    Sets up logging if nothing else has, so that creating the server in
    tests does not add duplicate handlers.

    Returns:
        FastMCP server instance
    """
    root_logger = logging.getLogger()
    if not root_logger.hasHandlers():
        from .config import get_config
        from .logging_config import setup_logging

        setup_logging(get_config())

    return FastMCP("gemurl")


mcp = create_mcp_server()


@mcp.tool()
async def parse_url(url: str) -> dict[str, Any]:
    """
    Split a URL into scheme, host, port, path, query and fragment.

    Use this tool to inspect a link before deciding how to handle it.
    Never fails on malformed input; missing parts are returned as "".

    Args:
        url: Absolute URL or relative reference

    Returns:
        Dictionary with status field indicating success or error.
        Success includes scheme, host, port, path, query and fragment.
    """
    # Lazy import to avoid import-time side effects
    from .tools.parse import parse_url as parse_url_impl

    return await parse_url_impl(url)


@mcp.tool()
async def resolve_url(base: str, reference: str) -> dict[str, Any]:
    """
    Resolve a link against the URL of the page it appears on.

    Use this tool to turn link text (absolute or relative, possibly with a
    non-ASCII host) into the absolute URL to navigate to. Also use it for
    redirect targets and check scheme_changed before following them.

    Args:
        base: Absolute URL of the current page
        reference: Link target or redirect destination (may be empty)

    Returns:
        Dictionary with status field indicating success or error.
        Success includes url, scheme, host and scheme_changed.

    Example:
        base "gemini://example.org/a/b/", reference "../c"
        -> url "gemini://example.org/a/c"
    """
    from .tools.resolve import resolve_url as resolve_url_impl

    return await resolve_url_impl(base, reference)


@mcp.tool()
async def normalize_url(url: str) -> dict[str, Any]:
    """
    Normalize an absolute URL.

    Removes "." and ".." path segments and the default gemini port (1965).

    Args:
        url: Absolute URL

    Returns:
        Dictionary with status field indicating success or error.
        Success includes url.
    """
    from .tools.parse import normalize_url as normalize_url_impl

    return await normalize_url_impl(url)


@mcp.tool()
async def encode_host(host: str) -> dict[str, Any]:
    """
    Convert a host name with non-ASCII labels to its "xn--" (punycode) form.

    Use this tool before connecting to an internationalized host.

    Args:
        host: Host name, e.g. "bücher.example"

    Returns:
        Dictionary with status field indicating success or error.
        Success includes host, e.g. "xn--bcher-kva.example".
    """
    from .tools.hosts import encode_host as encode_host_impl

    return await encode_host_impl(host)


@mcp.tool()
async def decode_host(host: str) -> dict[str, Any]:
    """
    Convert the "xn--" labels of a host name to Unicode for display.

    Args:
        host: Host name, e.g. "xn--bcher-kva.example"

    Returns:
        Dictionary with status field indicating success or error.
        Success includes host, e.g. "bücher.example".
    """
    from .tools.hosts import decode_host as decode_host_impl

    return await decode_host_impl(host)


@mcp.tool()
async def make_file_url(path: str) -> dict[str, Any]:
    """
    Build a file:// URL for a local filesystem path.

    Args:
        path: Local path; it does not have to exist

    Returns:
        Dictionary with status field indicating success or error.
        Success includes url.
    """
    from .tools.files import make_file_url as make_file_url_impl

    return await make_file_url_impl(path)


@mcp.tool()
async def describe_status(code: int) -> dict[str, Any]:
    """
    Get the icon, title and explanation for a Gemini status code.

    Args:
        code: Two-digit Gemini status code (e.g. 51)

    Returns:
        Dictionary with status field indicating success or error.
        Success includes code, defined, icon, title and message.
    """
    from .tools.status import describe_status as describe_status_impl

    return await describe_status_impl(code)


@mcp.tool()
async def health_check() -> dict[str, Any]:
    """
    Check server health and report configuration and tool metrics.

    Returns:
        Dictionary with status field ("healthy", "degraded" or "error").
    """
    from .config import get_config
    from .tools.health_check import health_check as health_check_impl

    config = get_config()
    if not config.enable_health_check:
        return {
            "status": "error",
            "error_code": "disabled",
            "message": "Health check tool is disabled. Set GEMURL_ENABLE_HEALTH_CHECK=true to enable.",
        }

    return await health_check_impl()
