"""Exception classes for strarray.

Provides the standardized exceptions raised by strarray.
"""

from __future__ import annotations


class StrArrayError(Exception):
    """Base exception for all strarray errors.

    Subclass this for specific error categories.
    """

    pass


class AllocationError(StrArrayError, MemoryError):
    """Memory exhaustion on the fallible allocation path.

    Raised by try_allocate/try_reallocate, and by the guarded allocators
    when the fatal exhaustion policy is switched off.
    """

    def __init__(self, requested: int, limit: int | None = None) -> None:
        """Initialize allocation error.

        Args:
            requested: Size of the failed request in bytes
            limit: Configured allocation limit, if one was in effect
        """
        self.requested = requested
        self.limit = limit

        detail = f" (limit {limit})" if limit is not None else ""
        super().__init__(f"cannot allocate {requested} bytes{detail}")


class FrozenArrayError(StrArrayError, TypeError):
    """Insertion attempted on the shared empty array.

    EMPTY_STRARRAY is shared by every caller; take a copy() first. This is
    the only error besides allocation failure, and it replaces the silent
    aliasing a mutated shared constant would cause. Appending nothing to
    the constant is not an error.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"{operation}() on the shared empty array; use StringArray() or EMPTY_STRARRAY.copy()"
        )
