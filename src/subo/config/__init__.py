"""Config module exports."""

from subo.config.loader import load_config
from subo.config.models import (
    BuildConfig,
    LoggingConfig,
    LogOutputConfig,
    SuboConfig,
)

__all__ = [
    "load_config",
    "SuboConfig",
    "BuildConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
