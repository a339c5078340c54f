"""Runtime configuration management.

Environment Variables:
    GEMURL_LOG_LEVEL: Logging level (default: INFO)
    GEMURL_LOG_MODE: Logging mode: stderr, file, both (default: stderr)
    GEMURL_LOG_FILE: Log file path (optional, for file/both modes)
    GEMURL_MAX_URL_LENGTH: Longest URL accepted by the tools (default: 1024)
    GEMURL_ENABLE_HEALTH_CHECK: Enable health_check tool (default: true)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, cast


@dataclass
class Config:
    """Runtime configuration for gemurl."""

    log_level: str  # Logging level: DEBUG, INFO, WARNING, ERROR
    log_mode: Literal["stderr", "file", "both"]  # Logging mode
    log_file: Path | None  # Log file path (for file/both modes)
    max_url_length: int  # Gemini requests carry at most 1024 bytes of URL
    enable_health_check: bool  # Enable health_check tool


_config: Config | None = None


def load_config() -> Config:
    """
    Load configuration from environment variables.

    Validates all configuration values and returns a Config instance with
    defaults applied.

    Returns:
        Config instance with validated values

    Raises:
        ValueError: If configuration values are invalid
    """
    # Parse log level
    log_level = os.getenv("GEMURL_LOG_LEVEL", "INFO").upper()
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if log_level not in valid_levels:
        raise ValueError(
            f"GEMURL_LOG_LEVEL must be one of {valid_levels}, got: {log_level}"
        )

    # Parse log mode
    log_mode_str = os.getenv("GEMURL_LOG_MODE", "stderr").lower()
    valid_modes = {"stderr", "file", "both"}
    if log_mode_str not in valid_modes:
        raise ValueError(
            f"GEMURL_LOG_MODE must be one of {valid_modes}, got: {log_mode_str}"
        )
    log_mode = cast(Literal["stderr", "file", "both"], log_mode_str)

    # Parse log file
    log_file = None
    if log_file_str := os.getenv("GEMURL_LOG_FILE"):
        log_file = Path(log_file_str).resolve()

    # Parse max URL length
    max_url_length_str = os.getenv("GEMURL_MAX_URL_LENGTH", "1024")
    try:
        max_url_length = int(max_url_length_str)
    except ValueError as e:
        raise ValueError(
            f"GEMURL_MAX_URL_LENGTH must be an integer, got: {max_url_length_str}"
        ) from e
    if max_url_length <= 0:
        raise ValueError(
            f"GEMURL_MAX_URL_LENGTH must be positive, got: {max_url_length}"
        )

    # Parse enable_health_check
    enable_health_check = os.getenv("GEMURL_ENABLE_HEALTH_CHECK", "true").lower() == "true"

    return Config(
        log_level=log_level,
        log_mode=log_mode,
        log_file=log_file,
        max_url_length=max_url_length,
        enable_health_check=enable_health_check,
    )


def get_config() -> Config:
    """
    Get singleton config instance.

    Loads configuration on first call and caches the result.

    Returns:
        Config instance (loads on first call)
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """
    Reset cached config (for testing only).

    This clears the singleton config instance, forcing load_config() to be
    called again on the next get_config() call.
    """
    global _config
    _config = None
