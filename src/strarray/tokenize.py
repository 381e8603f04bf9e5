"""Build string arrays by splitting delimited text.

Splitting treats every character of the delimiter set as an equivalent
separator. Runs of delimiters, and delimiters at either end, never produce
empty tokens. Each token is duplicated into the array, which owns it; the
source string is not retained.

Example:
    >>> list(split("a:b::c", ":"))
    ['a', 'b', 'c']
    >>> list(split("  -I/usr/include\\t-DNDEBUG ", " \\t"))
    ['-I/usr/include', '-DNDEBUG']
"""

from __future__ import annotations

import platform
import re
from collections.abc import Iterator
from functools import lru_cache

from strarray.alloc import duplicate
from strarray.array import StringArray
from strarray.utils.logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=64)
def _token_pattern(delimiters: str) -> re.Pattern[str]:
    return re.compile(f"[^{re.escape(delimiters)}]+")


def _tokens(text: str, delimiters: str) -> Iterator[str]:
    if not delimiters:
        # No separators: the whole text is the only token
        if text:
            yield text
        return
    for match in _token_pattern(delimiters).finditer(text):
        yield match.group()


def split(text: str, delimiters: str) -> StringArray:
    """Split text on any character in delimiters.

    Args:
        text: String to tokenize (not modified or retained)
        delimiters: Set of single-character separators

    Returns:
        New array owning a copy of every non-empty token, in order.
        Empty or delimiter-only text gives an array with count 0.
    """
    array = StringArray(owns_elements=True)
    for token in _tokens(text, delimiters):
        array.add(duplicate(token))
    logger.debug("Split %d characters into %d tokens", len(text), array.count)
    return array


def path_delimiter() -> str:
    """Return the host's path-list separator.

    ";" on native Windows, ":" everywhere else (Cygwin and MSYS included,
    whose platform.system() is not "Windows").
    """
    return ";" if platform.system() == "Windows" else ":"


def split_path(path: str | None) -> StringArray:
    """Split a PATH-style list using the host's native separator.

    A missing path (None) gives a fresh empty array with no storage,
    equal to EMPTY_STRARRAY.
    """
    if path is None:
        return StringArray()
    return split(path, path_delimiter())


__all__ = [
    "path_delimiter",
    "split",
    "split_path",
]
