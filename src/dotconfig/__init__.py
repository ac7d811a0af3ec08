"""dotconfig - Dot-path access to JSON and YAML configuration files."""

from __future__ import annotations

# Store
from dotconfig.config import Configuration
from dotconfig.options import StoreOptions

# Formats
from dotconfig.formats import Codec, Format, detect_format, get_codec

# Path access
from dotconfig.path import (
    BLOCKED_SEGMENTS,
    delete_path,
    get_path,
    has_path,
    parse_path,
    set_path,
)

# Errors
from dotconfig.errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigWriteError,
    DotConfigError,
    ErrorCodes,
)

__version__ = "0.1.0"

__all__ = [
    # Store
    "Configuration",
    "StoreOptions",
    # Formats
    "Format",
    "Codec",
    "detect_format",
    "get_codec",
    # Path access
    "BLOCKED_SEGMENTS",
    "parse_path",
    "has_path",
    "get_path",
    "set_path",
    "delete_path",
    # Errors
    "ErrorCodes",
    "DotConfigError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigWriteError",
]
