"""
Function: take_last

Keep items from one end of a sequence.
"""

from typing import Iterable, List, Optional, TypeVar

from ..registry import register_function
from ..safety import guard_none

T = TypeVar('T')


@register_function(
    category="sequences",
    description="Take n items from the end (n > 0) or from the start (n < 0)",
    examples=[
        {"input": [[1, 2, 3, 4, 5], 2], "output": [4, 5]},
        {"input": [[1, 2, 3, 4, 5], -2], "output": [1, 2]},
        {"input": [[1, 2, 3], 10], "output": [1, 2, 3]},
    ],
    tags=["sequence", "slice", "take"]
)
@guard_none()
def take_last(sequence: Iterable[T], n: int) -> Optional[List[T]]:
    """
    Take ``|n|`` items starting from the end of a sequence.

    Args:
        sequence: Items to slice (any finite iterable)
        n: Number of items to take; negative takes from the start

    Returns:
        New list of the taken items (all of them when ``|n|`` reaches the
        length), or None for an empty sequence
    """
    items = list(sequence)
    if not items:
        return None

    count = abs(n)
    if count >= len(items):
        return items

    return items[len(items) - count:] if n > 0 else items[:count]
