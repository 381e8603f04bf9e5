"""
strarray — string arrays for build tools

A growable, ordered collection of strings plus the allocation and
formatting helpers used to assemble compiler and linker command lines,
search paths and option lists. Zero runtime dependencies.

Quick Start:
    >>> from strarray import StringArray, join, split_path
    >>> args = StringArray()
    >>> args.add("gcc")
    >>> args.append_all(["-c", "main.c"])
    >>> join(args, " ")
    'gcc -c main.c'

    >>> dirs = split_path("/usr/local/bin:/usr/bin:/usr/bin")
    >>> unique = StringArray()
    >>> unique.append_all_unique(dirs)
    >>> list(unique)
    ['/usr/local/bin', '/usr/bin']

Out of memory:
    Command-line tools get the classic behaviour: a diagnostic on stderr and
    exit status 1. Libraries embedding strarray can switch to exceptions:

    >>> from strarray import AllocConfig, set_alloc_config
    >>> set_alloc_config(AllocConfig(fatal_on_exhaustion=False))
"""

from strarray.alloc import (
    allocate,
    duplicate,
    reallocate,
    reallocate_slots,
    try_allocate,
    try_reallocate,
)
from strarray.array import EMPTY_STRARRAY, StringArray
from strarray.config import (
    AllocConfig,
    alloc_config_context,
    get_alloc_config,
    reset_alloc_config,
    set_alloc_config,
)
from strarray.errors import AllocationError, FrozenArrayError, StrArrayError
from strarray.joiner import join
from strarray.ordering import Comparator, binary_search, natural_compare, sort
from strarray.stringbuilder import StringBuilder
from strarray.tokenize import path_delimiter, split, split_path
from strarray.text import ends_with, format_string

__version__ = "0.1.0"

__all__ = [
    "EMPTY_STRARRAY",
    "AllocConfig",
    "AllocationError",
    "Comparator",
    "FrozenArrayError",
    "StrArrayError",
    "StringArray",
    "StringBuilder",
    "__version__",
    "alloc_config_context",
    "allocate",
    "binary_search",
    "duplicate",
    "ends_with",
    "format_string",
    "get_alloc_config",
    "join",
    "natural_compare",
    "path_delimiter",
    "reallocate",
    "reallocate_slots",
    "reset_alloc_config",
    "set_alloc_config",
    "sort",
    "split",
    "split_path",
    "try_allocate",
    "try_reallocate",
]
