"""
Function: skip_at_indices

Exclude items by position.
"""

from typing import Iterable, List, Optional, TypeVar

from ..registry import register_function
from ..safety import guard_none

T = TypeVar('T')


@register_function(
    category="sequences",
    description="Drop the items at the given 0-based indices",
    examples=[
        {"input": [["a", "b", "c", "d"], [3, 0]], "output": ["b", "c"]},
        {"input": [["a", "b", "c"], []], "output": ["a", "b", "c"]},
    ],
    tags=["sequence", "index", "skip"]
)
@guard_none()
def skip_at_indices(sequence: Iterable[T], indices: Optional[Iterable[int]]) -> Optional[List[T]]:
    """
    Skip the items whose positions appear in ``indices``.

    Unlike take_at_indices, an empty list of indices keeps every item.
    """
    items = list(sequence)
    if indices is None:
        return items

    if not items:
        return None

    unwanted = set(indices)
    if not unwanted:
        return items

    return [item for i, item in enumerate(items) if i not in unwanted]
