"""Dotted-path access over a parsed document tree.

A document tree is made of plain ``dict``/``list`` containers and JSON-style
scalars. Paths such as ``"server.http.port"`` address nested mapping keys and
list indexes (``"servers.0.host"``). A literal dot inside a key is written
as ``\\.`` (``"hosts.example\\.com"``).

None of these functions raise for bad paths. Absent, empty, or blocked paths
degrade to ``False``, the default value, or a no-op.
"""

from __future__ import annotations

import logging
from typing import Any

__all__ = [
    "BLOCKED_SEGMENTS",
    "parse_path",
    "has_path",
    "get_path",
    "set_path",
    "delete_path",
]

logger = logging.getLogger(__name__)

BLOCKED_SEGMENTS: frozenset[str] = frozenset({"__proto__", "prototype", "constructor"})


def parse_path(path: str) -> list[str]:
    """Split a dotted path into its key segments.

    A piece ending in a backslash is joined to the following piece with a
    literal ``.``. A trailing backslash on the last piece is kept as-is.

    Args:
        path: The dotted path, e.g. ``"a.b\\.c"``.

    Returns:
        The segments (``["a", "b.c"]``), or an empty list if any segment is
        one of :data:`BLOCKED_SEGMENTS`. ``""`` yields ``[""]``.
    """
    pieces = path.split(".")
    segments: list[str] = []
    i = 0
    while i < len(pieces):
        segment = pieces[i]
        while segment.endswith("\\") and i + 1 < len(pieces):
            i += 1
            segment = segment[:-1] + "." + pieces[i]
        segments.append(segment)
        i += 1

    if any(segment in BLOCKED_SEGMENTS for segment in segments):
        logger.debug("Blocked path %r", path)
        return []
    return segments


_MISSING = object()


def _usable(segments: list[str]) -> bool:
    return bool(segments) and segments != [""]


def _index(segment: str) -> int | None:
    """Return the list index a segment names, or None."""
    if segment == "0" or (segment.isascii() and segment.isdigit() and segment[0] != "0"):
        return int(segment)
    return None


def _key_text(key: Any) -> str:
    # YAML spellings, so ``flags.true`` reaches a ``true:`` key.
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def _mapping_key(mapping: dict[Any, Any], segment: str) -> Any:
    """Find the key of ``mapping`` that ``segment`` names, or _MISSING."""
    if segment in mapping:
        return segment
    for key in mapping:
        if not isinstance(key, str) and _key_text(key) == segment:
            return key
    return _MISSING


def _lookup(node: Any, segment: str) -> Any:
    """Return the child of ``node`` at ``segment``, or _MISSING."""
    if isinstance(node, dict):
        key = _mapping_key(node, segment)
        return _MISSING if key is _MISSING else node[key]
    if isinstance(node, list):
        index = _index(segment)
        if index is not None and index < len(node):
            return node[index]
    return _MISSING


def _assign(node: dict[Any, Any] | list[Any], segment: str, value: Any) -> bool:
    if isinstance(node, dict):
        key = _mapping_key(node, segment)
        node[segment if key is _MISSING else key] = value
        return True
    index = _index(segment)
    if index is None or index > len(node):
        return False
    if index == len(node):
        node.append(value)
    else:
        node[index] = value
    return True


def has_path(tree: Any, path: str) -> bool:
    """Return True if every segment of ``path`` resolves to a key or index."""
    if not isinstance(tree, dict):
        return False
    segments = parse_path(path)
    if not _usable(segments):
        return False

    current: Any = tree
    for segment in segments:
        current = _lookup(current, segment)
        if current is _MISSING:
            return False
    return True


def get_path(tree: Any, path: str, default: Any = None) -> Any:
    """Get the value at ``path``, or ``default`` if it does not resolve.

    Numeric segments index into lists (``"servers.0.host"``). Falsy values
    stored at the final segment (``0``, ``False``, ``""``, ``None``) are
    returned as they are. A blocked or empty path returns ``None``
    regardless of ``default``.
    """
    if not isinstance(tree, dict):
        return default
    segments = parse_path(path)
    if not _usable(segments):
        return None

    current: Any = tree
    for segment in segments:
        current = _lookup(current, segment)
        if current is _MISSING:
            return default
    return current


def set_path(tree: Any, path: str, value: Any) -> Any:
    """Assign ``value`` at ``path``, creating intermediate mappings.

    Existing mappings and lists on the way are kept; any other value found
    there is replaced by an empty mapping. Inside a list, a segment must be
    an existing index or the next free one (which appends). The final
    assignment replaces whatever was there; nothing is merged.

    Returns:
        ``tree`` itself. It is left untouched when it is not a mapping, the
        path is blocked or empty, or a list segment is not a usable index.
    """
    if not isinstance(tree, dict):
        return tree
    segments = parse_path(path)
    if not _usable(segments):
        return tree

    current: Any = tree
    for segment in segments[:-1]:
        child = _lookup(current, segment)
        if not isinstance(child, (dict, list)):
            child = {}
            if not _assign(current, segment, child):
                return tree
        current = child
    _assign(current, segments[-1], value)
    return tree


def delete_path(tree: Any, path: str) -> bool:
    """Remove the key or list item at ``path``.

    List items are removed outright, so later items shift down by one.

    Returns:
        True if something was removed. Absent keys, blocked paths and
        scalar intermediates are no-ops returning False.
    """
    if not isinstance(tree, dict):
        return False
    segments = parse_path(path)
    if not _usable(segments):
        return False

    parent: Any = tree
    for segment in segments[:-1]:
        parent = _lookup(parent, segment)
        if not isinstance(parent, (dict, list)):
            return False

    last = segments[-1]
    if isinstance(parent, dict):
        key = _mapping_key(parent, last)
        if key is _MISSING:
            return False
        del parent[key]
        return True
    index = _index(last)
    if index is None or index >= len(parent):
        return False
    del parent[index]
    return True
