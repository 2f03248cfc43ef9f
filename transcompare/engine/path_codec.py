"""Key path codec.

Maps a nested JSON document to a flat ``{key_path: leaf}`` dictionary and
back. A key path uses ``.`` to descend into an object field and ``[n]`` to
descend into an array element, e.g. ``menu.items[0].label``.

Field names containing ``.``, ``[`` or ``]``, and empty field names, cannot be
told apart from path syntax; paths built from such names do not round-trip.
``flatten`` keeps the first leaf when two leaves land on the same path, and
skips a leaf whose path is empty, logging a warning in both cases.
"""

import copy
import logging
import re
from collections.abc import Mapping
from typing import Any

from transcompare.exceptions import KeyPathError
from transcompare.models.enums import MISSING, EmptyContainerPolicy
from transcompare.models.json_value import JsonArray, JsonObject, JsonValue, to_json_value

Segment = str | int

_SEGMENT_RE = re.compile(r"\[(\d+)\]|([^.\[\]]+)")

# Placeholder for array slots skipped by a later index, replaced by None
_HOLE = object()

logger = logging.getLogger(__name__)


def join_key_path(parent: str, segment: Segment) -> str:
    """Append one segment to a key path.

    Examples:
        >>> join_key_path("", "a")
        'a'
        >>> join_key_path("a", "b")
        'a.b'
        >>> join_key_path("a.b", 0)
        'a.b[0]'

    """
    if isinstance(segment, int):
        return f"{parent}[{segment}]"
    return f"{parent}.{segment}" if parent else segment


def split_key_path(key_path: str) -> list[Segment]:
    """Split a key path into field names (``str``) and array indexes (``int``).

    Raises:
        KeyPathError: If the path is empty

    """
    if not key_path:
        msg = "Key path is empty"
        raise KeyPathError(msg)

    segments: list[Segment] = []
    for match in _SEGMENT_RE.finditer(key_path):
        index, name = match.groups()
        segments.append(int(index) if index is not None else name)

    if not segments:
        msg = f"Key path has no segments: {key_path!r}"
        raise KeyPathError(msg)
    return segments


def flatten(
    data: Any,
    policy: EmptyContainerPolicy = EmptyContainerPolicy.DROP,
) -> dict[str, Any]:
    """Flatten a JSON document into a key path -> leaf dictionary.

    Args:
        data: Root object or array of one document (plain or tagged)
        policy: Whether empty objects/arrays are dropped or kept as leaves

    Returns:
        Flat mapping in traversal order

    Examples:
        >>> flatten({"a": {"b": "x", "c": [1, 2]}})
        {'a.b': 'x', 'a.c[0]': 1, 'a.c[1]': 2}

    """
    flat: dict[str, Any] = {}
    _flatten_into(to_json_value(data), "", flat, policy)
    return flat


def _flatten_into(
    node: JsonValue,
    path: str,
    flat: dict[str, Any],
    policy: EmptyContainerPolicy,
) -> None:
    if isinstance(node, JsonObject):
        children = [(join_key_path(path, name), child) for name, child in node.fields.items()]
        empty_leaf: Any = {}
    elif isinstance(node, JsonArray):
        children = [(join_key_path(path, index), child) for index, child in enumerate(node.items)]
        empty_leaf = []
    else:
        _record_leaf(flat, path, node.value)
        return

    if not children:
        # The root itself has no path to record it under
        if policy is EmptyContainerPolicy.KEEP and path:
            _record_leaf(flat, path, empty_leaf)
        return

    for child_path, child in children:
        _flatten_into(child, child_path, flat, policy)


def _record_leaf(flat: dict[str, Any], path: str, value: Any) -> None:
    if not path:
        logger.warning("Skipping leaf %r: empty field name gives an empty key path", value)
        return
    if path in flat:
        logger.warning("Key path %r is ambiguous, keeping first value %r", path, flat[path])
        return
    flat[path] = value


def unflatten(flat: Mapping[str, Any]) -> Any:
    """Rebuild a nested document from a key path -> leaf mapping.

    Containers are created on demand: an array when the next segment is an
    index, an object otherwise. A position that already holds a value is
    never overwritten by a later path. The root is an array only when every
    path starts with an index.

    Args:
        flat: Key path -> leaf mapping, e.g. the output of ``flatten``

    Returns:
        Nested ``dict`` / ``list`` structure

    Raises:
        KeyPathError: If two paths disagree on the shape of a container

    Examples:
        >>> unflatten({"a.b": "x", "a.c[0]": 1})
        {'a': {'b': 'x', 'c': [1]}}

    """
    paths = [(split_key_path(key_path), value) for key_path, value in flat.items()]

    result: Any
    if paths and all(isinstance(segments[0], int) for segments, _ in paths):
        result = []
    else:
        result = {}

    for segments, value in paths:
        _assign(result, segments, value)
    return _fill_holes(result)


def _assign(root: Any, segments: list[Segment], value: Any) -> None:
    node = root
    last = len(segments) - 1
    for position, segment in enumerate(segments):
        if position == last:
            default = copy.deepcopy(value) if isinstance(value, dict | list) else value
        elif isinstance(segments[position + 1], int):
            default = []
        else:
            default = {}
        node = _set_default(node, segment, default, segments)


def _set_default(node: Any, segment: Segment, default: Any, segments: list[Segment]) -> Any:
    if isinstance(node, dict):
        key = str(segment)
        if key not in node:
            node[key] = default
        return node[key]

    if isinstance(node, list) and isinstance(segment, int):
        while len(node) <= segment:
            node.append(_HOLE)
        if node[segment] is _HOLE:
            node[segment] = default
        return node[segment]

    msg = f"Cannot descend into {type(node).__name__} with {segment!r} (path {segments!r})"
    raise KeyPathError(msg)


def _fill_holes(node: Any) -> Any:
    if isinstance(node, dict):
        for key, child in node.items():
            node[key] = _fill_holes(child)
    elif isinstance(node, list):
        for index, child in enumerate(node):
            node[index] = None if child is _HOLE else _fill_holes(child)
    return node


def lookup_path(data: Any, key_path: str) -> Any:
    """Walk a nested document along a key path.

    Returns:
        The value at the path, or ``MISSING`` if any segment is absent

    """
    node = data
    for segment in split_key_path(key_path):
        if isinstance(node, dict):
            key = str(segment)
            if key not in node:
                return MISSING
            node = node[key]
        elif isinstance(node, list) and isinstance(segment, int) and segment < len(node):
            node = node[segment]
        else:
            return MISSING
    return node
