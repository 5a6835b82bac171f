"""Path evaluation over decoded InnerTube JSON trees.

Paths are plain strings in the form used throughout the assemblers::

    musicTwoRowItemRenderer.subtitle.runs[2].text
    flexColumns[0].musicResponsiveListItemFlexColumnRenderer.text.runs[0]
    ..streamingData.adaptiveFormats

A name selects a property of an object, ``[i]`` selects an array element,
and ``..name`` selects the first value stored under ``name`` at any depth
below the current node. There is no length operator: callers that need the
last element compute the index first and format it into the path.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from ytmparse.exceptions import PathNotFoundError

__all__ = [
    "Segment",
    "find_all_by_key",
    "parse_path",
    "select",
    "select_optional",
]

_NAME_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$-]*")
_INDEX_RE = re.compile(r"\[(\d+)\]")


@dataclass(frozen=True)
class Segment:
    """One step of a parsed path.

    Exactly one of ``name`` or ``index`` is set. ``deep`` marks a
    search-by-key step.
    """

    name: str | None = None
    index: int | None = None
    deep: bool = False


class _Missing:
    """Marker for a segment that did not resolve."""


_MISSING = _Missing()


def parse_path(path: str) -> tuple[Segment, ...]:
    """Parse a path string into segments.

    Raises:
        ValueError: If the path string is malformed.
    """
    if not path:
        raise ValueError("Path must not be empty")

    segments: list[Segment] = []
    pos = 0
    while pos < len(path):
        deep = False
        if path.startswith("..", pos):
            deep = True
            pos += 2
        elif path[pos] == ".":
            if not segments:
                raise ValueError(f"Path starts with '.': {path}")
            pos += 1
        elif path[pos] == "[":
            match = _INDEX_RE.match(path, pos)
            if not match:
                raise ValueError(f"Invalid index at {pos} in path: {path}")
            segments.append(Segment(index=int(match.group(1))))
            pos = match.end()
            continue
        elif segments:
            raise ValueError(f"Missing separator at {pos} in path: {path}")

        match = _NAME_RE.match(path, pos)
        if not match:
            raise ValueError(f"Expected a name at {pos} in path: {path}")
        segments.append(Segment(name=match.group(0), deep=deep))
        pos = match.end()

    return tuple(segments)


def _step(node: Any, segment: Segment) -> Any:
    if segment.deep:
        assert segment.name is not None
        return next(_iter_by_key(node, segment.name), _MISSING)
    if segment.index is not None:
        if isinstance(node, list) and segment.index < len(node):
            return node[segment.index]
        return _MISSING
    if isinstance(node, dict) and segment.name in node:
        return node[segment.name]
    return _MISSING


def _resolve(node: Any, path: str) -> Any:
    segments = parse_path(path)
    current = node
    last = len(segments) - 1
    for i, segment in enumerate(segments):
        current = _step(current, segment)
        if current is _MISSING:
            return _MISSING
        # A null in the middle of a path has nothing below it
        if current is None and i < last:
            return _MISSING
    return current


def select(node: Any, path: str) -> Any:
    """Resolve a required path.

    A JSON ``null`` at the end of the path resolves to ``None``; type
    checks are left to the coercion helpers.

    Raises:
        PathNotFoundError: If any segment is absent.
    """
    result = _resolve(node, path)
    if result is _MISSING:
        raise PathNotFoundError(path)
    return result


def select_optional(node: Any, path: str) -> Any | None:
    """Resolve an optional path, returning None when absent or null."""
    result = _resolve(node, path)
    if result is _MISSING:
        return None
    return result


def _iter_by_key(node: Any, key: str) -> Iterator[Any]:
    if isinstance(node, dict):
        for name, value in node.items():
            if name == key:
                yield value
            yield from _iter_by_key(value, key)
    elif isinstance(node, list):
        for item in node:
            yield from _iter_by_key(item, key)


def find_all_by_key(node: Any, key: str) -> list[Any]:
    """Find every value stored under ``key`` at any depth, in document order.

    Matches nested inside other matches are included. Pass the smallest
    subtree known to contain the key to keep the walk short.
    """
    return list(_iter_by_key(node, key))
