"""Allocation guard for strarray.

Every allocation the library makes goes through this module, so callers
never see a failure value: when memory runs out, a command-line tool prints
a fixed diagnostic and exits with status 1.

The exit is a policy, not a hard-wired behaviour. An embedding application
that needs to recover switches it off through AllocConfig, or calls the
try_* variants, and gets AllocationError instead.

Blocks are bytearrays. Element storage for StringArray is a list of slots
(string references or None), sized in units of one pointer.

Example:
    >>> from strarray.alloc import allocate, reallocate
    >>> block = allocate(0)
    >>> len(block)
    1
    >>> block = reallocate(bytearray(b"abc"), 2)
    >>> bytes(block)
    b'ab'
"""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from strarray.config import get_alloc_config
from strarray.errors import AllocationError
from strarray.utils.logger import get_logger

logger = get_logger(__name__)

EXHAUSTED_MESSAGE = "Virtual memory exhausted.\n"

# Accounting size of one element slot (a pointer on the host)
SLOT_SIZE = struct.calcsize("P")

Slots = list[str | None]


def _check_limit(size: int) -> None:
    limit = get_alloc_config().allocation_limit
    if limit is not None and size > limit:
        raise AllocationError(size, limit)


def _new_block(size: int) -> bytearray:
    _check_limit(size)
    try:
        return bytearray(size)
    except (MemoryError, OverflowError) as e:
        raise AllocationError(size) from e


@contextmanager
def _exhaustion_policy() -> Iterator[None]:
    """Apply the configured exhaustion policy to AllocationError."""
    try:
        yield
    except AllocationError as e:
        config = get_alloc_config()
        if not config.fatal_on_exhaustion:
            raise
        logger.error("Allocation failed: %s", e)
        sys.stderr.write(EXHAUSTED_MESSAGE)
        sys.stderr.flush()
        raise SystemExit(config.exit_status) from e


def try_allocate(size: int) -> bytearray:
    """Allocate a zeroed block of at least max(size, 1) bytes.

    Raises:
        AllocationError: Memory is exhausted or the request exceeds the
            configured allocation_limit
    """
    return _new_block(max(size, 1))


def try_reallocate(block: bytearray | None, size: int) -> bytearray:
    """Resize block, preserving its first min(len(block), size) bytes.

    A None block behaves like try_allocate. A zero size yields an empty
    block rather than a failure.

    Raises:
        AllocationError: Memory is exhausted or the request exceeds the
            configured allocation_limit
    """
    if block is None:
        return try_allocate(size)
    if size == 0:
        return bytearray()
    new = _new_block(size)
    keep = min(len(block), size)
    new[:keep] = block[:keep]
    return new


def try_reallocate_slots(slots: Slots | None, size: int) -> Slots:
    """Resize element storage to size slots.

    Existing references keep their order and identity; new slots are None.

    Raises:
        AllocationError: Memory is exhausted or the request exceeds the
            configured allocation_limit
    """
    _check_limit(size * SLOT_SIZE)
    try:
        new: Slots = list(slots[:size]) if slots else []
        new.extend([None] * (size - len(new)))
    except (MemoryError, OverflowError) as e:
        raise AllocationError(size * SLOT_SIZE) from e
    return new


def allocate(size: int) -> bytearray:
    """Allocate a zeroed block of at least max(size, 1) bytes.

    Never returns a failure value; exhaustion follows the configured policy.
    """
    with _exhaustion_policy():
        return try_allocate(size)


def reallocate(block: bytearray | None, size: int) -> bytearray:
    """Resize block, preserving its first min(len(block), size) bytes.

    Never returns a failure value; exhaustion follows the configured policy.
    """
    with _exhaustion_policy():
        return try_reallocate(block, size)


def reallocate_slots(slots: Slots | None, size: int) -> Slots:
    """Resize element storage; exhaustion follows the configured policy."""
    with _exhaustion_policy():
        return try_reallocate_slots(slots, size)


@contextmanager
def reserve(size: int) -> Iterator[None]:
    """Account a request of size units and guard the work done inside.

    Used where the storage is built by Python itself (str.join). A request
    over the limit, or a MemoryError raised in the block, follows the
    configured exhaustion policy.

    Example:
        >>> with reserve(len(a) + len(b) + 1):
        ...     result = a + b
    """
    with _exhaustion_policy():
        _check_limit(size)
        try:
            yield
        except AllocationError:
            raise
        except MemoryError as e:
            raise AllocationError(size) from e


def duplicate(text: str) -> str:
    """Return an owned plain-str copy of text.

    Strings are immutable, so the copy may share storage with text; the
    request is still accounted as len(text) + 1 bytes against the limit.
    """
    with _exhaustion_policy():
        _check_limit(len(text) + 1)
        return str(text)


__all__ = [
    "EXHAUSTED_MESSAGE",
    "SLOT_SIZE",
    "allocate",
    "duplicate",
    "reallocate",
    "reallocate_slots",
    "reserve",
    "try_allocate",
    "try_reallocate",
    "try_reallocate_slots",
]
