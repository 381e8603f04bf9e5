"""Text helpers used alongside string arrays.

Example:
    >>> from strarray.text import ends_with, format_string
    >>> ends_with("main.c", ".c")
    True
    >>> format_string("%s.o", "main")
    'main.o'
"""

from __future__ import annotations

from typing import Any

from strarray.alloc import allocate
from strarray.config import get_alloc_config
from strarray.utils.logger import get_logger

logger = get_logger(__name__)


def ends_with(text: str, suffix: str) -> bool:
    """Return True if text ends with suffix.

    Examples:
        >>> ends_with("main.c", ".cpp")
        False
        >>> ends_with("x", "")
        True
    """
    return text.endswith(suffix)


def _render_into(buffer: bytearray, format: str, args: tuple[Any, ...]) -> int:
    """Render format % args into buffer, snprintf style.

    Writes at most len(buffer) - 1 bytes plus a NUL terminator and returns
    the full rendered length in bytes, whether or not it fit.
    """
    rendered = (format % args).encode("utf-8", "surrogatepass")
    n = len(rendered)
    keep = min(n, len(buffer) - 1)
    buffer[:keep] = rendered[:keep]
    buffer[keep] = 0
    return n


def format_string(format: str, *args: Any) -> str:
    """Render a printf-style format into a newly allocated string.

    Probes a buffer of AllocConfig.format_buffer_size bytes (capped at
    allocation_limit) and retries with the exact required size when the
    output does not fit. Lone surrogates pass through unchanged.

    Args:
        format: %-style format string
        *args: Values consumed by the format

    Returns:
        The rendered string, sized exactly to the output

    Examples:
        >>> format_string("-L%s", "/usr/lib")
        '-L/usr/lib'
        >>> format_string("%d%%", 50)
        '50%'
    """
    config = get_alloc_config()
    size = config.format_buffer_size
    if config.allocation_limit is not None:
        # The probe alone must not exhaust the limit
        size = min(size, config.allocation_limit)
    while True:
        buffer = allocate(size)
        n = _render_into(buffer, format, args)
        if n < len(buffer):
            return buffer[:n].decode("utf-8", "surrogatepass")
        logger.debug("format_string: %d bytes needed, probe was %d", n + 1, size)
        size = n + 1
