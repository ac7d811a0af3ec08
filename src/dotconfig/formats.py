"""File formats and the parse/dump codecs bound to them."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable

import yaml

__all__ = ["Format", "Codec", "detect_format", "get_codec"]

logger = logging.getLogger(__name__)


class Format(str, Enum):
    """Serialization format of a configuration file."""

    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_extension(cls, extension: str) -> Format:
        """Map a file extension to a format, falling back to JSON."""
        ext = extension.lower().lstrip(".")
        if ext == "json":
            return cls.JSON
        if ext in ("yml", "yaml"):
            return cls.YAML
        logger.warning("Unrecognized config extension %r, using JSON", extension)
        return cls.JSON


def detect_format(path: str | Path) -> Format:
    """Pick the format for ``path`` from its suffix."""
    return Format.from_extension(Path(path).suffix)


@dataclass(frozen=True)
class Codec:
    """Parse/dump pair for one format.

    Attributes:
        format: The format this codec handles.
        parse: Text to document tree.
        dump: Document tree and indent to text.
        errors: Exception types ``parse`` raises on malformed input.
        dump_errors: Exception types ``dump`` raises for values the format
            cannot represent.
    """

    format: Format
    parse: Callable[[str], Any]
    dump: Callable[[Any, int | None], str]
    errors: tuple[type[Exception], ...]
    dump_errors: tuple[type[Exception], ...]


def _dump_json(data: Any, indent: int | None) -> str:
    return json.dumps(data, ensure_ascii=False, indent=indent)


def _dump_yaml(data: Any, indent: int | None) -> str:
    return yaml.safe_dump(
        data,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        indent=indent,
    )


_CODECS: dict[Format, Codec] = {
    Format.JSON: Codec(Format.JSON, json.loads, _dump_json, (json.JSONDecodeError,), (TypeError, ValueError)),
    Format.YAML: Codec(Format.YAML, yaml.safe_load, _dump_yaml, (yaml.YAMLError,), (yaml.YAMLError,)),
}


def get_codec(fmt: Format) -> Codec:
    """Return the codec registered for ``fmt``."""
    return _CODECS[fmt]
