"""Read-only sequence views handed out by the registries.

A ``ReadOnlyList`` is a snapshot: it owns its own tuple of items, so later
registry mutations never show through, and every list-style mutator raises
``ReadOnlyViolation``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar, overload

from .exceptions import ReadOnlyViolation

T = TypeVar("T")


def _refuse(*_args: Any, **_kwargs: Any) -> None:
    raise ReadOnlyViolation("This list is a read-only view and cannot be modified")


class ReadOnlyList(Sequence[T], Generic[T]):
    """Immutable, list-like snapshot of registry items."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> ReadOnlyList[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ReadOnlyList(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ReadOnlyList({list(self._items)!r})"

    def __add__(self, other: Iterable[T]) -> list[T]:
        return [*self._items, *other]

    # -- mutators -----------------------------------------------------------

    append = _refuse
    extend = _refuse
    insert = _refuse
    remove = _refuse
    pop = _refuse
    clear = _refuse
    sort = _refuse
    reverse = _refuse
    __setitem__ = _refuse
    __delitem__ = _refuse
    __iadd__ = _refuse
    __imul__ = _refuse
