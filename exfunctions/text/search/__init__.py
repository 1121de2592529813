"""
Search Functions

Counting, locating and splitting on patterns.
"""

from .frequency import pattern_frequency
from .nth_index import nth_index_of, NOT_FOUND
from .palindrome import is_palindrome
from .split import split_regex

__all__ = [
    'pattern_frequency',
    'nth_index_of',
    'NOT_FOUND',
    'is_palindrome',
    'split_regex',
]
