"""Resolve tool implementation.

This module provides the resolve_url MCP tool, which turns a link found on a
page into the absolute URL a client should navigate to.
"""

import time
from typing import Any

from ..config import get_config
from ..logging_config import get_logger
from ..metrics import get_metrics_collector
from ..url import decompose, resolve
from ..validation import ValidationError, validate_url_input

logger = get_logger("tools.resolve")


async def resolve_url(base: str, reference: str) -> dict[str, Any]:
    """
    Resolve a reference against a base URL.

    Args:
        base: Absolute URL of the current page
        reference: Link target, absolute or relative (may be empty)

    Returns:
        Discriminated union dict with status field:

        Success:
            {
                "status": "success",
                "url": "gemini://example.org/a/c",
                "scheme": "gemini",
                "host": "example.org",
                "scheme_changed": false
            }

        Error:
            {
                "status": "error",
                "error_code": "validation_error" | "execution_error",
                "message": "Human-readable error message"
            }

    Example:
        >>> result = await resolve_url("gemini://example.org/a/b/", "../c")
        >>> result["url"]
        'gemini://example.org/a/c'
    """
    logger.info(f"resolve_url called: base={base!r}, reference={reference!r}")
    start_time = time.time()
    success = False

    try:
        config = get_config()
        try:
            base = validate_url_input("base", base, max_length=config.max_url_length)
            reference = validate_url_input(
                "reference", reference, max_length=config.max_url_length, allow_empty=True
            )
        except ValidationError as e:
            logger.warning(f"Input validation failed: {e}")
            return e.to_error_response()

        try:
            resolved = resolve(base, reference)
            view = decompose(resolved)
        except Exception as e:
            logger.error(f"Unexpected error during resolve: {e}", exc_info=True)
            return {
                "status": "error",
                "error_code": "execution_error",
                "message": f"Unexpected error during resolve: {e}",
            }

        # Clients must not follow a redirect that changes the scheme silently
        scheme_changed = view.scheme_text.lower() != decompose(base).scheme_text.lower()
        if scheme_changed:
            logger.info(f"Scheme change: {base!r} -> {resolved!r}")

        success = True
        return {
            "status": "success",
            "url": resolved,
            "scheme": view.scheme_text,
            "host": view.host_text,
            "scheme_changed": scheme_changed,
        }
    finally:
        duration_ms = (time.time() - start_time) * 1000
        await get_metrics_collector().record("resolve_url", duration_ms, success)
