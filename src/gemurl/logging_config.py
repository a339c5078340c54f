"""Logging configuration for gemurl.

JSON lines go to stderr (the MCP stdio transport owns stdout); an optional
human-readable log file can be added for development.

IMPORTANT: No logging at import time. All logging setup must happen explicitly
via setup_logging().
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

# Request ID for correlation across async tool calls
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

# Extra record attributes copied into JSON output
_EXTRA_FIELDS = ("tool", "url", "duration", "error_code")


class JsonFormatter(logging.Formatter):
    """Format log records as JSON lines for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as one JSON line.

        Non-ASCII text (Unicode hosts and paths) is written as-is.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log line
        """
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if request_id := request_id_var.get():
            log_obj["request_id"] = request_id

        # Tool name, URL, duration and error code passed via extra=
        for key in _EXTRA_FIELDS:
            if hasattr(record, key):
                log_obj[key] = getattr(record, key)

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, ensure_ascii=False)


class RequestIdFilter(logging.Filter):
    """Inject request_id into log records from context variable."""

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Add request_id to the record when one is set for the current call.

        Args:
            record: Log record to filter

        Returns:
            True (always pass through)
        """
        if request_id := request_id_var.get():
            record.request_id = request_id  # type: ignore[attr-defined]
        return True


def setup_logging(config: "Config") -> None:
    """
    Configure logging based on config.log_mode.

    Args:
        config: Configuration instance with logging settings

    Logging Modes:
        - "stderr": JSON formatter to stderr (default)
        - "file": Human-readable format to config.log_file
        - "both": Both outputs

    Call once at startup, never at import time.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    json_formatter = JsonFormatter()
    human_formatter = logging.Formatter(
        "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    request_id_filter = RequestIdFilter()

    if config.log_mode in ("stderr", "both"):
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(json_formatter)
        stderr_handler.addFilter(request_id_filter)
        root_logger.addHandler(stderr_handler)

    if config.log_mode in ("file", "both"):
        log_file = _get_log_file(config)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(human_formatter)
        file_handler.addFilter(request_id_filter)
        root_logger.addHandler(file_handler)

    logging.getLogger("gemurl").setLevel(config.log_level)

    logging.info(
        "Logging initialized",
        extra={
            "log_mode": config.log_mode,
            "log_level": config.log_level,
        },
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the gemurl namespace.

    Args:
        name: Logger name (e.g., "tools.resolve_url")

    Returns:
        Logger instance for "gemurl.<name>"

    Example:
        >>> get_logger("url.resolve").name
        'gemurl.url.resolve'
    """
    return logging.getLogger(f"gemurl.{name}")


def _get_log_file(config: "Config") -> Path:
    """
    Get the log file path, picking one if config does not name it.

    Args:
        config: Configuration instance

    Returns:
        config.log_file, or a timestamped file in the platform log directory
    """
    if config.log_file:
        return config.log_file

    log_dir = _get_log_directory()
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    return log_dir / f"gemurl-{timestamp}.log"


def _get_log_directory() -> Path:
    """
    Get platform-appropriate log directory.

    Returns:
        Path to log directory
    """
    if sys.platform == "win32":
        return Path.home() / "AppData" / "Local" / "gemurl" / "logs"
    return Path.home() / ".gemurl" / "logs"
