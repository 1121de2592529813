"""
Sequence Slicing Functions

Positional slicing from either end and index-based selection over any
finite iterable. Each function is in a separate file.
"""

from .skip_last import skip_last
from .take_last import take_last
from .take_at_indices import take_at_indices
from .skip_at_indices import skip_at_indices

__all__ = [
    'skip_last',
    'take_last',
    'take_at_indices',
    'skip_at_indices',
]
