"""File URL tool implementation."""

import time
from typing import Any

from ..config import get_config
from ..logging_config import get_logger
from ..metrics import get_metrics_collector
from ..url import make_file_url as make_file_url_impl
from ..validation import ValidationError, validate_local_path_input

logger = get_logger("tools.files")


async def make_file_url(path: str) -> dict[str, Any]:
    """
    Build a file:// URL for a local path.

    The path is not required to exist.

    Args:
        path: Local filesystem path

    Returns:
        Success:
            {"status": "success", "url": "file:///home/user/notes%20.gmi"}

        Error:
            {"status": "error", "error_code": "validation_error", "message": "..."}
    """
    logger.info(f"make_file_url called: path={path!r}")
    start_time = time.time()
    success = False

    try:
        config = get_config()
        try:
            path = validate_local_path_input(path, max_length=config.max_url_length)
        except ValidationError as e:
            logger.warning(f"Input validation failed: {e}")
            return e.to_error_response()

        try:
            url = make_file_url_impl(path)
        except Exception as e:
            logger.error(f"Unexpected error building file URL: {e}", exc_info=True)
            return {
                "status": "error",
                "error_code": "execution_error",
                "message": f"Unexpected error building file URL: {e}",
            }

        success = True
        return {"status": "success", "url": url}
    finally:
        duration_ms = (time.time() - start_time) * 1000
        await get_metrics_collector().record("make_file_url", duration_ms, success)
