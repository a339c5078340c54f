"""Health check tool implementation.

This module provides the health_check MCP tool, which reports configuration,
uptime and tool metrics, and runs a few known resolutions as a self-test.
"""

import codecs
import time
from typing import Any

from .. import __version__
from ..config import get_config
from ..logging_config import get_logger
from ..metrics import get_metrics_collector
from ..url import decode_host, encode_host, resolve

logger = get_logger("tools.health_check")

# Track server start time (lazy initialization)
_server_start_time: float | None = None

# (base, reference, expected)
_SELF_TEST_RESOLUTIONS = (
    ("gemini://example.org/a/b/c", "d/e", "gemini://example.org/a/b/d/e"),
    ("gemini://example.org/a/b/", "../c", "gemini://example.org/a/c"),
    ("gemini://example.org/", "//other.org:1965/x", "gemini://other.org/x"),
)


def _run_self_test() -> list[str]:
    """Return a diagnostic for every self-test case that fails."""
    diagnostics: list[str] = []

    try:
        codecs.lookup("punycode")
    except LookupError:
        diagnostics.append("punycode codec is not available")
        return diagnostics

    for base, reference, expected in _SELF_TEST_RESOLUTIONS:
        actual = resolve(base, reference)
        if actual != expected:
            diagnostics.append(
                f"resolve({base!r}, {reference!r}) returned {actual!r}, expected {expected!r}"
            )

    sample_host = "bücher.example"
    if decode_host(encode_host(sample_host)) != sample_host:
        diagnostics.append(f"host round trip failed for {sample_host!r}")

    return diagnostics


async def health_check() -> dict[str, Any]:
    """
    Check server health.

    Returns:
        Healthy:
            {
                "status": "healthy",
                "version": "0.1.0",
                "config": {
                    "log_level": "INFO",
                    "log_mode": "stderr",
                    "max_url_length": 1024,
                    "enable_health_check": true
                },
                "uptime_seconds": 123.45,
                "metrics": {"uptime_seconds": 123.45, "tools": [...]}
            }

        Degraded (self-test failed): as above plus
            "diagnostics": ["resolve(...) returned ..., expected ..."]

        Error:
            {
                "status": "error",
                "error_code": "execution_error",
                "message": "Human-readable error message"
            }
    """
    logger.info("health_check called")

    config = get_config()

    try:
        diagnostics = _run_self_test()
    except Exception as e:
        logger.error(f"Unexpected error during self-test: {e}", exc_info=True)
        return {
            "status": "error",
            "error_code": "execution_error",
            "message": f"Self-test failed: {e}",
        }

    for message in diagnostics:
        logger.warning(message)

    config_summary = {
        "log_level": config.log_level,
        "log_mode": config.log_mode,
        "max_url_length": config.max_url_length,
        "enable_health_check": config.enable_health_check,
    }

    # Calculate uptime (initialize on first call)
    global _server_start_time
    if _server_start_time is None:
        _server_start_time = time.time()
    uptime_seconds = time.time() - _server_start_time

    metrics_collector = get_metrics_collector()
    response: dict[str, Any] = {
        "status": "degraded" if diagnostics else "healthy",
        "version": __version__,
        "config": config_summary,
        "uptime_seconds": round(uptime_seconds, 2),
        "metrics": {
            "uptime_seconds": round(metrics_collector.uptime_seconds(), 2),
            "tools": [m.to_dict() for m in metrics_collector.get_all_metrics()],
        },
    }
    if diagnostics:
        response["diagnostics"] = diagnostics

    logger.info("Health check completed")
    return response
