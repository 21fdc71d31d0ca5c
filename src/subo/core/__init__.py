"""Core module exports."""

from subo.core.errors import (
    ConfigError,
    ContextError,
    ErrorCode,
    SuboError,
)
from subo.core.logging import configure_logging, get_log_file_path, get_logger

__all__ = [
    # Errors
    "SuboError",
    "ConfigError",
    "ContextError",
    "ErrorCode",
    # Logging
    "configure_logging",
    "get_log_file_path",
    "get_logger",
]
