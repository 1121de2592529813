"""
Function: take_at_indices

Select items by position.
"""

from typing import Iterable, List, Optional, TypeVar

from ..registry import register_function
from ..safety import guard_none

T = TypeVar('T')


@register_function(
    category="sequences",
    description="Keep only the items at the given 0-based indices, in sequence order",
    examples=[
        {"input": [["a", "b", "c", "d"], [3, 0]], "output": ["a", "d"]},
        {"input": [["a", "b", "c"], []], "output": None},
        {"input": [["a", "b", "c"], None], "output": ["a", "b", "c"]},
    ],
    tags=["sequence", "index", "take"]
)
@guard_none()
def take_at_indices(sequence: Iterable[T], indices: Optional[Iterable[int]]) -> Optional[List[T]]:
    """
    Take the items whose positions appear in ``indices``.

    No indices at all (None) means no filtering; an empty list of indices
    selects nothing and yields None.
    """
    items = list(sequence)
    if indices is None:
        return items

    if not items:
        return None

    wanted = set(indices)
    if not wanted:
        return None

    return [item for i, item in enumerate(items) if i in wanted]
