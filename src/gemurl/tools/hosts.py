"""Host transcoding tool implementations.

encode_host converts a Unicode host name to the ASCII form sent over the
wire; decode_host converts it back for display.
"""

import time
from collections.abc import Callable
from typing import Any

from ..config import get_config
from ..logging_config import get_logger
from ..metrics import get_metrics_collector
from ..url import decode_host as decode_host_impl
from ..url import encode_host as encode_host_impl
from ..validation import ValidationError, validate_host_input

logger = get_logger("tools.hosts")


async def _transcode(tool: str, host: str, convert: Callable[[str], str]) -> dict[str, Any]:
    logger.info(f"{tool} called: host={host!r}")
    start_time = time.time()
    success = False

    try:
        config = get_config()
        try:
            host = validate_host_input(host, max_length=config.max_url_length)
        except ValidationError as e:
            logger.warning(f"Input validation failed: {e}")
            return e.to_error_response()

        try:
            converted = convert(host)
        except Exception as e:
            logger.error(f"Unexpected error during {tool}: {e}", exc_info=True)
            return {
                "status": "error",
                "error_code": "execution_error",
                "message": f"Unexpected error during {tool}: {e}",
            }

        success = True
        return {"status": "success", "host": converted}
    finally:
        duration_ms = (time.time() - start_time) * 1000
        await get_metrics_collector().record(tool, duration_ms, success)


async def encode_host(host: str) -> dict[str, Any]:
    """
    Convert a host name to its ASCII-compatible ("xn--") form.

    Returns:
        Success:
            {"status": "success", "host": "xn--bcher-kva.example"}

        Error:
            {"status": "error", "error_code": "validation_error", "message": "..."}
    """
    return await _transcode("encode_host", host, encode_host_impl)


async def decode_host(host: str) -> dict[str, Any]:
    """
    Convert the "xn--" labels of a host name back to Unicode.

    Labels that are not valid punycode are returned unchanged.

    Returns:
        Success:
            {"status": "success", "host": "bücher.example"}

        Error:
            {"status": "error", "error_code": "validation_error", "message": "..."}
    """
    return await _transcode("decode_host", host, decode_host_impl)
