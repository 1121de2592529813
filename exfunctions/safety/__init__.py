"""
Safety Module

Guards that turn degenerate input into sentinel results.
"""

from .guards import PASSTHROUGH, guard_blank, guard_empty, guard_none, is_blank

__all__ = [
    'PASSTHROUGH',
    'guard_blank',
    'guard_empty',
    'guard_none',
    'is_blank',
]
