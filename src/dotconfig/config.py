"""Configuration store backed by a JSON or YAML file."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import pydantic

from dotconfig.errors import ConfigError, ConfigNotFoundError, ConfigParseError, ConfigWriteError
from dotconfig.formats import Format, detect_format, get_codec
from dotconfig.options import StoreOptions
from dotconfig.path import delete_path, get_path, has_path, set_path

__all__ = ["Configuration"]

logger = logging.getLogger(__name__)


class Configuration:
    """File-backed configuration accessor with dot-path key support.

    The parsed document is owned by the store. Every ``set``/``delete``
    rewrites the whole file and then re-reads it, so the in-memory tree
    always reflects what is on disk.

    Example::

        config = Configuration("settings.yaml")
        config.get("server.port", 8080)
        config.set("server.host", "0.0.0.0").delete("server.debug")

    Args:
        path: Path to an existing ``.json``, ``.yml`` or ``.yaml`` file.
            Other extensions are read and written as JSON.
        format: Optional explicit format overriding the extension.
        indent: Indentation width for written files.
        encoding: Text encoding of the file.

    Raises:
        ConfigError: If the options are invalid.
        ConfigNotFoundError: If ``path`` is not an existing, readable file.
        ConfigParseError: If the file content is malformed.
    """

    def __init__(
        self,
        path: str | Path,
        format: Format | str | None = None,
        *,
        indent: int | None = None,
        encoding: str = "utf-8",
    ) -> None:
        try:
            self._options = StoreOptions(format=format, indent=indent, encoding=encoding)
        except pydantic.ValidationError as e:
            errors = [
                {
                    "field": ".".join(str(loc) for loc in err["loc"]),
                    "code": err["type"],
                    "message": err["msg"],
                }
                for err in e.errors()
            ]
            raise ConfigError(message="Invalid configuration options", errors=errors) from e

        self._path = Path(path)
        if not self._path.is_file():
            raise ConfigNotFoundError(config_path=str(path))

        self._format = self._options.format or detect_format(self._path)
        self._codec = get_codec(self._format)
        self._data: Any = self._read()

    @property
    def path(self) -> Path:
        """The backing file."""
        return self._path

    @property
    def format(self) -> Format:
        """The format used to parse and write the backing file."""
        return self._format

    @property
    def data(self) -> Any:
        """A deep copy of the current document tree."""
        return copy.deepcopy(self._data)

    def get(self, path: str, default: Any = None) -> Any:
        """Get a value by dot-path key.

        ``default`` is returned when the key is absent, holds null, or the
        path is blocked.
        """
        value = get_path(self._data, path, default)
        return default if value is None else value

    def has(self, path: str) -> bool:
        """Check whether a dot-path key exists."""
        return has_path(self._data, path)

    def set(self, path: str, value: Any) -> Configuration:
        """Set a value by dot-path key and persist the document."""
        working = copy.deepcopy(self._data)
        set_path(working, path, value)
        self._persist(working)
        return self

    def delete(self, path: str) -> Configuration:
        """Remove a dot-path key and persist the document."""
        working = copy.deepcopy(self._data)
        if not delete_path(working, path):
            logger.debug("Nothing to delete at %r in %s", path, self._path)
        self._persist(working)
        return self

    def reload(self) -> Configuration:
        """Re-read the backing file, replacing the in-memory tree."""
        self._data = self._read()
        return self

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.has(path)

    def __repr__(self) -> str:
        return f"Configuration(path={str(self._path)!r}, format={self._format.value!r})"

    def _read(self) -> Any:
        try:
            text = self._path.read_text(encoding=self._options.encoding)
        except OSError as e:
            raise ConfigNotFoundError(config_path=str(self._path), cause=e) from e
        except UnicodeDecodeError as e:
            raise ConfigParseError(
                config_path=str(self._path),
                format=self._format.value,
                reason=f"not valid {self._options.encoding} text: {e}",
                cause=e,
            ) from e

        try:
            data = self._codec.parse(text)
        except self._codec.errors as e:
            raise ConfigParseError(
                config_path=str(self._path),
                format=self._format.value,
                reason=str(e),
                cause=e,
            ) from e

        logger.debug("Loaded %s configuration from %s", self._format.value, self._path)
        return data

    def _persist(self, tree: Any) -> None:
        # set/delete cannot change a non-mapping root, so the file is left alone.
        if not isinstance(tree, dict):
            logger.debug("Root of %s is not a mapping, nothing written", self._path)
            return
        self._write(tree)

    def _write(self, tree: Any) -> None:
        try:
            text = self._codec.dump(tree, self._options.indent)
        except self._codec.dump_errors as e:
            raise ConfigWriteError(
                config_path=str(self._path),
                reason=f"cannot serialize as {self._format.value}: {e}",
                cause=e,
            ) from e

        try:
            self._path.write_text(text, encoding=self._options.encoding)
        except (OSError, UnicodeEncodeError) as e:
            raise ConfigWriteError(config_path=str(self._path), reason=str(e), cause=e) from e

        logger.debug("Wrote %s configuration to %s", self._format.value, self._path)
        self.reload()
