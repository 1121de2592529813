"""
Slicing Functions

Substrings by count, by position, by marker and around the midpoint.
"""

from .ends import left, right
from .between import between
from .markers import left_of, right_of, between_markers
from .middle import middle, middle_span

__all__ = [
    'left',
    'right',
    'between',
    'left_of',
    'right_of',
    'between_markers',
    'middle',
    'middle_span',
]
