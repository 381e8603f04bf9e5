"""ContextVar-based allocation configuration for strarray.

Holds the policy the allocation guard applies when memory runs out, plus the
probe size used by format_string. Config is set by the embedding tool, read
by every allocation in the context.

Thread Safety:
    ContextVars are thread-local by design. A policy set in one thread does
    not leak into another.

Usage:
    # Library embedding: recoverable errors instead of process exit
    from strarray.config import AllocConfig, alloc_config_context

    with alloc_config_context(AllocConfig(fatal_on_exhaustion=False)):
        array = split(huge_text, ";")

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class AllocConfig:
    """Immutable allocation configuration.

    Attributes:
        fatal_on_exhaustion: Print the diagnostic and exit when memory runs out
            (command-line tool policy). When False, AllocationError is raised.
        exit_status: Process exit status used by the fatal policy
        allocation_limit: Largest single block in bytes; larger requests are
            treated as exhaustion (None = no cap)
        format_buffer_size: Initial probe buffer size for format_string

    """

    fatal_on_exhaustion: bool = True
    exit_status: int = 1
    allocation_limit: int | None = None
    format_buffer_size: int = 100

    @classmethod
    def from_dict(cls, config_dict: dict) -> "AllocConfig":
        """Create AllocConfig from dictionary.

        Only includes keys that are valid AllocConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = AllocConfig.from_dict({
            ...     "fatal_on_exhaustion": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.fatal_on_exhaustion
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: AllocConfig = AllocConfig()

_alloc_config: ContextVar[AllocConfig] = ContextVar(
    "alloc_config",
    default=_DEFAULT_CONFIG,
)


def get_alloc_config() -> AllocConfig:
    """Get current allocation configuration (thread-local)."""
    return _alloc_config.get()


def set_alloc_config(config: AllocConfig) -> None:
    """Set allocation configuration for current context.

    Args:
        config: AllocConfig instance to use for this context.

    """
    _alloc_config.set(config)


def reset_alloc_config() -> None:
    """Reset to the default (fatal) configuration."""
    _alloc_config.set(_DEFAULT_CONFIG)


@contextmanager
def alloc_config_context(config: AllocConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with alloc_config_context(AllocConfig(allocation_limit=64)):
        ...     try_allocate(128)
        Traceback (most recent call last):
        ...
        strarray.errors.AllocationError: cannot allocate 128 bytes (limit 64)

    """
    previous = _alloc_config.get()
    _alloc_config.set(config)
    try:
        yield
    finally:
        _alloc_config.set(previous)


__all__ = [
    "AllocConfig",
    "alloc_config_context",
    "get_alloc_config",
    "reset_alloc_config",
    "set_alloc_config",
]
