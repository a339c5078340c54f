"""Parse and normalize tool implementations.

parse_url exposes the components of a URL; normalize_url returns the
canonical spelling of an absolute URL (no dot-segments, no default port).
"""

import time
from typing import Any

from ..config import get_config
from ..logging_config import get_logger
from ..metrics import get_metrics_collector
from ..url import decompose, normalize_url_path, strip_default_port
from ..validation import ValidationError, validate_url_input

logger = get_logger("tools.parse")


async def parse_url(url: str) -> dict[str, Any]:
    """
    Split a URL into scheme, host, port, path, query and fragment.

    Args:
        url: URL or relative reference

    Returns:
        Success:
            {
                "status": "success",
                "scheme": "gemini",
                "host": "example.org",
                "port": "1966",
                "path": "/docs/",
                "query": "",
                "fragment": ""
            }

        Error:
            {
                "status": "error",
                "error_code": "validation_error" | "execution_error",
                "message": "Human-readable error message"
            }
    """
    logger.info(f"parse_url called: url={url!r}")
    start_time = time.time()
    success = False

    try:
        config = get_config()
        try:
            url = validate_url_input("url", url, max_length=config.max_url_length)
        except ValidationError as e:
            logger.warning(f"Input validation failed: {e}")
            return e.to_error_response()

        try:
            components = decompose(url).to_dict()
        except Exception as e:
            logger.error(f"Unexpected error during parse: {e}", exc_info=True)
            return {
                "status": "error",
                "error_code": "execution_error",
                "message": f"Unexpected error during parse: {e}",
            }

        success = True
        return {"status": "success", **components}
    finally:
        duration_ms = (time.time() - start_time) * 1000
        await get_metrics_collector().record("parse_url", duration_ms, success)


async def normalize_url(url: str) -> dict[str, Any]:
    """
    Remove dot-segments and the default gemini port from a URL.

    Args:
        url: Absolute URL

    Returns:
        Success:
            {"status": "success", "url": "gemini://example.org/a/c"}

        Error:
            {
                "status": "error",
                "error_code": "validation_error" | "execution_error",
                "message": "Human-readable error message"
            }
    """
    logger.info(f"normalize_url called: url={url!r}")
    start_time = time.time()
    success = False

    try:
        config = get_config()
        try:
            url = validate_url_input("url", url, max_length=config.max_url_length)
        except ValidationError as e:
            logger.warning(f"Input validation failed: {e}")
            return e.to_error_response()

        try:
            normalized = strip_default_port(normalize_url_path(url))
        except Exception as e:
            logger.error(f"Unexpected error during normalize: {e}", exc_info=True)
            return {
                "status": "error",
                "error_code": "execution_error",
                "message": f"Unexpected error during normalize: {e}",
            }

        success = True
        return {"status": "success", "url": normalized}
    finally:
        duration_ms = (time.time() - start_time) * 1000
        await get_metrics_collector().record("normalize_url", duration_ms, success)
