"""Growable, ordered string array.

StringArray is the collection build tools use to assemble command lines,
search paths and option lists. Elements are string references kept in
insertion order; membership and uniqueness compare by exact equality.

Growth:
    Storage starts empty (capacity 0). The first insertion allocates 16
    slots, every later overflow doubles the capacity, so n insertions copy
    O(n) references in total. Reallocation keeps the order and identity of
    the stored references.

Ownership:
    Arrays filled with add() borrow the caller's strings. Arrays produced by
    the tokenizer own duplicated tokens (owns_elements is True). Owned
    copies are never released one by one; they live as long as the process
    or the array, whichever ends first.

Empty array:
    EMPTY_STRARRAY is a shared zero value. It is frozen: add-family calls
    that would insert into it raise FrozenArrayError (appending nothing is
    allowed). StringArray() and EMPTY_STRARRAY.copy() give an independent
    empty value that compares equal to it.

Thread Safety:
    None. An array is mutated only by its owning caller.

Example:
    >>> args = StringArray()
    >>> args.add("-O2")
    >>> args.add_unique("-Wall")
    >>> args.add_unique("-O2")
    >>> list(args)
    ['-O2', '-Wall']
    >>> args.capacity
    16
"""

from __future__ import annotations

import operator
from bisect import bisect_left
from collections.abc import Callable, Iterable, Iterator
from typing import Any, overload

from strarray import alloc
from strarray.errors import FrozenArrayError
from strarray.utils.logger import get_logger

logger = get_logger(__name__)

INITIAL_CAPACITY = 16
GROWTH_FACTOR = 2


class StringArray:
    """Ordered, growable collection of string references.

    Attributes (read-only):
        count: Number of strings in use
        capacity: Number of allocated slots (count <= capacity)
        owns_elements: True when the elements are array-owned copies

    """

    __slots__ = ("_count", "_size", "_str", "_owned", "_frozen")

    def __init__(self, *, owns_elements: bool = False) -> None:
        """Initialize an empty array without allocating storage."""
        self._count = 0
        self._size = 0
        self._str: alloc.Slots | None = None
        self._owned = owns_elements
        self._frozen = False

    @classmethod
    def from_iterable(
        cls, items: Iterable[str], *, owns_elements: bool = False
    ) -> StringArray:
        """Build an array by adding each item in order."""
        array = cls(owns_elements=owns_elements)
        for text in items:
            array.add(text)
        return array

    @classmethod
    def _frozen_empty(cls) -> StringArray:
        array = cls()
        array._frozen = True
        return array

    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return self._size

    @property
    def owns_elements(self) -> bool:
        return self._owned

    @property
    def frozen(self) -> bool:
        """True only for the shared EMPTY_STRARRAY constant."""
        return self._frozen

    def _check_mutable(self, operation: str) -> None:
        if self._frozen:
            raise FrozenArrayError(operation)

    def _grow(self) -> None:
        size = self._size * GROWTH_FACTOR if self._size else INITIAL_CAPACITY
        self._str = alloc.reallocate_slots(self._str, size)
        logger.debug("Grew string array storage %d -> %d slots", self._size, size)
        self._size = size

    def _snapshot(self) -> list[str]:
        if not self._count:
            return []
        return self._str[: self._count]  # type: ignore[index,return-value]

    def add(self, text: str) -> None:
        """Append text by reference as the new last element.

        Amortized O(1): a full array doubles its capacity first.
        """
        self._check_mutable("add")
        if self._count == self._size:
            self._grow()
        self._str[self._count] = text  # type: ignore[index]
        self._count += 1

    def add_unique(self, text: str) -> None:
        """Append text unless an equal string is already present.

        O(n). The first occurrence keeps its position.
        """
        self._check_mutable("add_unique")
        if not self.contains(text):
            self.add(text)

    def append_all(self, other: StringArray | Iterable[str]) -> None:
        """Append every element of other, in order, without deduplication.

        Appending an array to itself appends its original elements once.
        """
        items = _snapshot_of(other)
        if items:
            self._check_mutable("append_all")
        for text in items:
            self.add(text)

    def append_all_unique(self, other: StringArray | Iterable[str]) -> None:
        """add_unique() each element of other, in order."""
        items = _snapshot_of(other)
        if items:
            self._check_mutable("append_all_unique")
        for text in items:
            self.add_unique(text)

    def contains(self, text: str) -> bool:
        """O(n) membership test by exact string equality."""
        slots = self._str
        for i in range(self._count):
            if slots[i] == text:  # type: ignore[index]
                return True
        return False

    def copy(self) -> StringArray:
        """Return an independent, mutable array with the same elements.

        References are copied, not the strings; capacity is preserved.
        """
        array = StringArray(owns_elements=self._owned)
        if self._str is not None:
            array._str = alloc.reallocate_slots(self._str, self._size)
        array._count = self._count
        array._size = self._size
        return array

    def sort(self, *, key: Callable[[str], Any] | None = None) -> None:
        """Reorder the first count elements in place, like list.sort()."""
        if self._count < 2:
            return
        slots = self._str
        slots[: self._count] = sorted(slots[: self._count], key=key)  # type: ignore[index,arg-type]

    def bisect_left(self, x: Any, *, key: Callable[[str], Any] | None = None) -> int:
        """Insertion point for x in the sorted elements (bisect.bisect_left).

        As with bisect, key is applied to the elements, not to x.
        """
        if not self._count:
            return 0
        return bisect_left(self._str, x, 0, self._count, key=key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> Iterator[str]:
        return iter(self._snapshot())

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        if isinstance(index, slice):
            return self._snapshot()[index]
        i = operator.index(index)
        if i < 0:
            i += self._count
        if not 0 <= i < self._count:
            raise IndexError("string array index out of range")
        return self._str[i]  # type: ignore[index,return-value]

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.contains(text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringArray):
            return self._snapshot() == other._snapshot()
        if isinstance(other, (list, tuple)):
            return self._snapshot() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StringArray({self._snapshot()!r})"


def _snapshot_of(other: StringArray | Iterable[str]) -> list[str]:
    if isinstance(other, StringArray):
        return other._snapshot()
    return list(other)


EMPTY_STRARRAY: StringArray = StringArray._frozen_empty()


__all__ = [
    "EMPTY_STRARRAY",
    "GROWTH_FACTOR",
    "INITIAL_CAPACITY",
    "StringArray",
]
