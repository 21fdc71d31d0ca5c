"""subo error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Context (runnable discovery, bundle, directive)
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Context (3xxx)
    CONTEXT_DIRECTORY_UNREADABLE = 3001
    CONTEXT_MANIFEST_UNREADABLE = 3002
    CONTEXT_MANIFEST_PARSE = 3003
    CONTEXT_UNSUPPORTED_LANG = 3004
    CONTEXT_BUNDLE_STAT = 3005
    CONTEXT_DIRECTIVE_PARSE = 3006
    CONTEXT_MODULE_OPEN = 3007


@dataclass(frozen=True, slots=True)
class SuboError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(SuboError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ContextError(SuboError):
    """Build context assembly errors. All of them abort the scan."""

    @classmethod
    def directory_unreadable(cls, path: str, reason: str) -> "ContextError":
        return cls(
            code=ErrorCode.CONTEXT_DIRECTORY_UNREADABLE,
            message=f"Failed to list directory {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def manifest_unreadable(cls, path: str, reason: str) -> "ContextError":
        return cls(
            code=ErrorCode.CONTEXT_MANIFEST_UNREADABLE,
            message=f"Failed to read runnable manifest {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def manifest_parse(cls, path: str, reason: str) -> "ContextError":
        return cls(
            code=ErrorCode.CONTEXT_MANIFEST_PARSE,
            message=f"Failed to parse runnable manifest {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def unsupported_lang(cls, name: str, lang: str, path: str) -> "ContextError":
        return cls(
            code=ErrorCode.CONTEXT_UNSUPPORTED_LANG,
            message=f"({name}) {lang} is not a valid lang",
            details={"name": name, "lang": lang, "path": path},
        )

    @classmethod
    def bundle_stat(cls, path: str, reason: str) -> "ContextError":
        return cls(
            code=ErrorCode.CONTEXT_BUNDLE_STAT,
            message=f"Failed to stat bundle {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def directive_parse(cls, path: str, reason: str) -> "ContextError":
        return cls(
            code=ErrorCode.CONTEXT_DIRECTIVE_PARSE,
            message=f"Failed to load directive {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def module_open(cls, path: str, reason: str) -> "ContextError":
        return cls(
            code=ErrorCode.CONTEXT_MODULE_OPEN,
            message=f"Failed to open module file {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def during(cls, stage: str, cause: "ContextError") -> "ContextError":
        """Re-label an error with the assembly stage it escaped from.

        Code and details of the cause are preserved.
        """
        return cls(
            code=cause.code,
            message=f"{stage}: {cause.message}",
            details={**cause.details, "stage": stage},
        )
