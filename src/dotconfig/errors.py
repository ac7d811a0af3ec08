"""Error hierarchy for dotconfig."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "DotConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigWriteError",
    "ConfigError",
    "ErrorCodes",
]


class DotConfigError(Exception):
    """Base error for all dotconfig errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(DotConfigError):
    """Raised when a configuration file does not exist or cannot be read."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        """The path that could not be found."""
        return self.details["config_path"]


class ConfigParseError(DotConfigError):
    """Raised when a configuration file holds malformed JSON or YAML."""

    def __init__(self, config_path: str, format: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=f"Invalid {format.upper()} in '{config_path}': {reason}",
            details={"config_path": config_path, "format": format, "reason": reason},
            **kwargs,
        )


class ConfigWriteError(DotConfigError):
    """Raised when the serialized document cannot be written back to disk."""

    def __init__(self, config_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_WRITE_ERROR",
            message=f"Cannot write configuration file '{config_path}': {reason}",
            details={"config_path": config_path, "reason": reason},
            **kwargs,
        )


class ConfigError(DotConfigError):
    """Raised when store options are invalid."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_INVALID",
            message=message,
            details={"errors": errors or []},
            **kwargs,
        )


class ErrorCodes:
    """All dotconfig error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_NOT_FOUND:
            create_default_config()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    CONFIG_WRITE_ERROR = "CONFIG_WRITE_ERROR"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
