"""Assembly of list surfaces.

Two policies are offered and the caller picks one:

- ``assemble_all`` fails on the first malformed item.
- ``assemble_each`` assembles every item it can and hands back the
  failures next to the results.

Neither logs; reporting isolated failures is up to the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from ytmparse.assemblers.common import PLAY_BUTTON_PLAYLIST_ID, TWO_ROW
from ytmparse.exceptions import AssemblyError
from ytmparse.lib.coercion import select_array
from ytmparse.lib.navigator import select_optional
from ytmparse.models.results import BatchResult

T = TypeVar("T")

Assembler = Callable[[Any], T]
ItemFilter = Callable[[Any], bool]


def _items(node: Any, path: str, where: ItemFilter | None) -> list[tuple[int, Any]]:
    items = select_array(node, path)
    return [(i, item) for i, item in enumerate(items) if where is None or where(item)]


def assemble_all(
    node: Any,
    path: str,
    assembler: Assembler[T],
    *,
    where: ItemFilter | None = None,
) -> list[T]:
    """Assemble every item of a list, failing on the first bad one.

    Args:
        node: Tree containing the list.
        path: Path to the list.
        assembler: Per-item assembler, e.g. ``assemble_library_song``.
        where: Optional predicate; items it rejects are skipped (continuation
            markers, shelf headers).

    Returns:
        Assembled entities in document order.

    Raises:
        PathNotFoundError: If the list is absent.
        TypeMismatchError: If the node at ``path`` is not a list.
        AssemblyError: For the first malformed item, carrying its index in
            the source list.
    """
    results = []
    for i, item in _items(node, path, where):
        try:
            results.append(assembler(item))
        except AssemblyError as e:
            raise e.at_index(i) from e.__cause__
    return results


def assemble_each(
    node: Any,
    path: str,
    assembler: Assembler[T],
    *,
    where: ItemFilter | None = None,
) -> BatchResult[T]:
    """Assemble every item of a list, collecting failures per item.

    Args:
        node: Tree containing the list.
        path: Path to the list.
        assembler: Per-item assembler.
        where: Optional predicate; items it rejects are skipped.

    Returns:
        BatchResult with the assembled entities and one AssemblyError per
        malformed item.

    Raises:
        PathNotFoundError: If the list is absent.
        TypeMismatchError: If the node at ``path`` is not a list.
    """
    items: list[T] = []
    errors: list[AssemblyError] = []
    for i, item in _items(node, path, where):
        try:
            items.append(assembler(item))
        except AssemblyError as e:
            errors.append(e.at_index(i))
    return BatchResult(items=items, errors=errors)


def has_key(key: str) -> ItemFilter:
    """Item filter keeping only items that wrap the given renderer."""

    def predicate(item: Any) -> bool:
        return isinstance(item, dict) and key in item

    return predicate


def has_play_button(item: Any) -> bool:
    """Item filter for two-row grids whose tiles must be playable.

    The library playlist grid opens with a "New playlist" tile that has
    nothing to play.
    """
    return select_optional(item, f"{TWO_ROW}.{PLAY_BUTTON_PLAYLIST_ID}") is not None
