"""Utility modules for strarray.

Provides:
- logger: get_logger for logging
"""

from strarray.utils.logger import get_logger

__all__ = ["get_logger"]
