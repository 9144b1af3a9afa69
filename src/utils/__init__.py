"""
Shared utilities
"""

from .logger import (
    Logger,
    get_logger,
    set_global_debug,
)

__all__ = [
    'Logger',
    'get_logger',
    'set_global_debug',
]
