"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (SUBO__SECTION__KEY)
3. Project YAML (.subo/config.yaml)
4. Global YAML (~/.config/subo/config.yaml)
5. Built-in defaults (this file)

Examples:
    SUBO__LOGGING__LEVEL=DEBUG
    SUBO__BUILD__LANGS='["rust", "tinygo"]'
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        SUBO__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG reports every scanned directory.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class BuildConfig(BaseModel):
    """Build selection.

    Env vars:
        SUBO__BUILD__LANGS: JSON list of languages to build
    """

    langs: list[str] = Field(
        default_factory=list,
        description="Only build Runnables written in these languages. Empty builds all.",
    )

    @field_validator("langs")
    @classmethod
    def validate_langs(cls, v: list[str]) -> list[str]:
        from subo.context.images import supported_langs

        known = supported_langs()
        unknown = [lang for lang in v if lang not in known]
        if unknown:
            raise ValueError(f"Unsupported langs {unknown}, expected any of {list(known)}")
        return v


class SuboConfig(BaseModel):
    """Root configuration for subo."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    build: BuildConfig = Field(default_factory=BuildConfig)
