"""
Function: skip_last

Drop items from one end of a sequence.
"""

from typing import Iterable, List, Optional, TypeVar

from ..registry import register_function
from ..safety import guard_none

T = TypeVar('T')


@register_function(
    category="sequences",
    description="Skip n items from the end (n > 0) or from the start (n < 0)",
    examples=[
        {"input": [[1, 2, 3, 4, 5], 2], "output": [1, 2, 3]},
        {"input": [[1, 2, 3, 4, 5], -2], "output": [3, 4, 5]},
        {"input": [[1, 2, 3], 3], "output": None},
    ],
    tags=["sequence", "slice", "skip"]
)
@guard_none()
def skip_last(sequence: Iterable[T], n: int) -> Optional[List[T]]:
    """
    Skip ``|n|`` items starting from the end of a sequence.

    The sign is the reverse of ``itertools.islice`` habits: a positive ``n``
    drops items from the tail, a negative ``n`` drops them from the head.

    Args:
        sequence: Items to slice (any finite iterable)
        n: Number of items to skip

    Returns:
        New list of the remaining items, or None when the sequence is empty
        or ``|n|`` is not smaller than its length
    """
    items = list(sequence)
    if not items:
        return None

    count = abs(n)
    if count >= len(items):
        return None

    return items[:len(items) - count] if n > 0 else items[count:]
