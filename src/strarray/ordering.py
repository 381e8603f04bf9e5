"""Comparator-driven sort and binary search over string arrays.

A comparator takes two strings and returns a negative, zero or positive
int, like C's strcmp. Passing None selects natural string ordering.

binary_search() requires the array to be sorted with the same comparator;
the precondition is not checked.

Example:
    >>> libs = StringArray.from_iterable(["z", "m", "c"])
    >>> sort(libs)
    >>> list(libs)
    ['c', 'm', 'z']
    >>> binary_search(libs, "m")
    'm'
    >>> binary_search(libs, "q") is None
    True
"""

from __future__ import annotations

from collections.abc import Callable
from functools import cmp_to_key

from strarray.array import StringArray

Comparator = Callable[[str, str], int]


def natural_compare(a: str, b: str) -> int:
    """Three-way comparison using str ordering."""
    return (a > b) - (a < b)


def sort(array: StringArray, compare: Comparator | None = None) -> None:
    """Reorder the elements of array in place.

    No-op for fewer than two elements. The comparator must not mutate the
    array. Stability across equal elements is not part of the contract.
    """
    if array.count < 2:
        return
    array.sort(key=cmp_to_key(compare) if compare is not None else None)


def binary_search(
    array: StringArray, key: str, compare: Comparator | None = None
) -> str | None:
    """Find the element comparing equal to key in a sorted array.

    Returns:
        The stored element (not key itself), or None when absent
    """
    count = array.count
    if not count:
        return None
    if compare is None:
        compare = natural_compare
    wrap = cmp_to_key(compare)
    i = array.bisect_left(wrap(key), key=wrap)
    if i < count and compare(array[i], key) == 0:
        return array[i]
    return None


__all__ = [
    "Comparator",
    "binary_search",
    "natural_compare",
    "sort",
]
