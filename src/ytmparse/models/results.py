"""Batch assembly results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ytmparse.exceptions import AssemblyError

T = TypeVar("T")


@dataclass(frozen=True)
class BatchResult(Generic[T]):
    """Outcome of assembling a list surface item by item.

    Attributes:
        items: Entities that assembled, in document order.
        errors: One AssemblyError per malformed item, each carrying the
            item's index in the source list.
    """

    items: list[T] = field(default_factory=list)
    errors: list[AssemblyError] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of items in the source list."""
        return len(self.items) + len(self.errors)

    @property
    def ok(self) -> bool:
        """True when every item assembled."""
        return not self.errors
