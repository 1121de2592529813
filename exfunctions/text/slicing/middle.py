"""
Function: middle

Characters on either side of the midpoint of a string.
"""

from typing import Optional, Tuple

from ...registry import register_function
from ...safety import guard_empty


def middle_span(source: str, left_count: int, right_count: int) -> Tuple[int, int]:
    """
    Start and end offsets of the middle segment.

    The midpoint is ``len(source) // 2``; up to ``|left_count|`` characters
    are taken before it and up to ``|right_count|`` from it onwards.
    """
    mid = len(source) // 2
    before = min(abs(left_count), mid)
    after = min(abs(right_count), len(source) - mid)
    return mid - before, mid + after


@register_function(
    category="text.slicing",
    description="Characters around the midpoint, bounded independently on each side",
    examples=[
        {"input": ["abcdefgh", 2, 2], "output": "cdef"},
        {"input": ["abcdefgh", 1, 3], "output": "defg"},
        {"input": ["abcdefgh", 100, 100], "output": "abcdefgh"},
        {"input": ["abcdefg", 0, 1], "output": "d"},
    ],
    tags=["slice", "middle"]
)
@guard_empty()
def middle(source: str, left_count: int, right_count: int) -> Optional[str]:
    """
    Get characters to the left and right of the middle of a string.

    Args:
        source: The source string
        left_count: Characters to take before the midpoint (absolute value)
        right_count: Characters to take from the midpoint on (absolute value)

    Returns:
        The middle segment, or None for an empty source
    """
    start, end = middle_span(source, left_count, right_count)
    return source[start:end]
