"""Serialize a string array back into a single delimited string.

Example:
    >>> join(["/usr/bin", "/bin"], ";")
    '/usr/bin;/bin'
    >>> join([], "/")
    ''
"""

from __future__ import annotations

from collections.abc import Iterable

from strarray import alloc
from strarray.array import StringArray
from strarray.stringbuilder import StringBuilder


def join(array: StringArray | Iterable[str], separator: str) -> str:
    """Join the elements of array with separator.

    The separator appears exactly count - 1 times and never at either end.
    An empty array gives a new empty string. The result length plus one is
    accounted against the allocation limit before building.
    """
    items = list(array)
    size = sum(len(text) for text in items) + 1
    if items:
        size += (len(items) - 1) * len(separator)
    with alloc.reserve(size):
        return StringBuilder().extend(items, separator).build()


__all__ = ["join"]
