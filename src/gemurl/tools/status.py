"""Status description tool implementation."""

import time
from typing import Any

from ..logging_config import get_logger
from ..metrics import get_metrics_collector
from ..status import describe_status as describe_status_impl
from ..status import is_defined_status
from ..validation import ValidationError, validate_status_code_input

logger = get_logger("tools.status")


async def describe_status(code: int) -> dict[str, Any]:
    """
    Describe a Gemini status code for display.

    Unknown codes get the generic "Unknown Status Code" description and
    "defined": false.

    Returns:
        Success:
            {
                "status": "success",
                "code": 51,
                "defined": true,
                "icon": "🔍",
                "title": "Not Found",
                "message": "The requested resource could not be found at this time."
            }

        Error:
            {"status": "error", "error_code": "validation_error", "message": "..."}
    """
    logger.info(f"describe_status called: code={code!r}")
    start_time = time.time()
    success = False

    try:
        try:
            code = validate_status_code_input(code)
        except ValidationError as e:
            logger.warning(f"Input validation failed: {e}")
            return e.to_error_response()

        info = describe_status_impl(code)
        success = True
        return {
            "status": "success",
            "code": code,
            "defined": is_defined_status(code),
            **info.to_dict(),
        }
    finally:
        duration_ms = (time.time() - start_time) * 1000
        await get_metrics_collector().record("describe_status", duration_ms, success)
