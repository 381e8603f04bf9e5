"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Used by join() to serialize arrays into
command lines and path lists.

Thread Safety:
    StringBuilder instances are local to each join() call.
    No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Efficient string accumulator.

    Appends to a list, joins once at the end.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("gcc").append(" ").append("-c")
            StringBuilder(6)
            >>> sb.build()
            'gcc -c'
            >>> len(sb)
            6

    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def extend(self, strings: Iterable[str], separator: str = "") -> StringBuilder:
        """Append several strings, with separator between consecutive ones.

        Args:
            strings: Strings to append, in order
            separator: Inserted between strings, never before the first
                or after the last

        Returns:
            self for method chaining
        """
        for i, s in enumerate(strings):
            if i:
                self.append(separator)
            self.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts ("" when empty)
        """
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        self._length = 0
        return self

    def __len__(self) -> int:
        """Return the length of the string build() would return."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if any non-empty part has been appended."""
        return bool(self._parts)

    def __repr__(self) -> str:
        return f"StringBuilder({self._length})"
