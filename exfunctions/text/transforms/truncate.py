"""
Function: truncate, truncate_middle, truncate_ends

Replace a run of characters at an end or in the middle of a string.
"""

from typing import Optional

from ...registry import register_function
from ...safety import guard_empty
from ..slicing import middle_span


def _splice(source: str, start: int, end: int, replacement: str) -> str:
    if start >= end:
        return source
    return source[:start] + replacement + source[end:]


@register_function(
    category="text.transforms",
    description="Replace the last n characters (first |n| if negative) with a replacement",
    examples=[
        {"input": ["Hello world", 5], "kwargs": {"replacement": "..."}, "output": "Hello ..."},
        {"input": ["Hello world", -6], "kwargs": {"replacement": "..."}, "output": "...world"},
        {"input": ["Hello world", 0], "output": "Hello world"},
        {"input": ["abc", 10], "kwargs": {"replacement": "-"}, "output": "-"},
    ],
    tags=["truncate", "transform"]
)
@guard_empty()
def truncate(source: str, n: int, replacement: str = "") -> Optional[str]:
    """
    Get the truncated version of the string.

    Args:
        source: The source string
        n: Characters to cut from the right; negative cuts from the left
        replacement: Text put in place of the removed characters, e.g. "..."

    Returns:
        The truncated string, or None for an empty source
    """
    count = min(abs(n), len(source))
    if n > 0:
        return _splice(source, len(source) - count, len(source), replacement)
    return _splice(source, 0, count, replacement)


@register_function(
    category="text.transforms",
    description="Replace the middle segment (see middle) with a replacement",
    examples=[
        {"input": ["abcdefgh", 2, 2], "kwargs": {"replacement": "~"}, "output": "ab~gh"},
        {"input": ["abcdefgh", 0, 0], "kwargs": {"replacement": "~"}, "output": "abcdefgh"},
    ],
    tags=["truncate", "middle", "transform"]
)
@guard_empty()
def truncate_middle(source: str, left_count: int, right_count: int, replacement: str = "") -> Optional[str]:
    """Cut characters around the midpoint and put ``replacement`` in their place."""
    start, end = middle_span(source, left_count, right_count)
    return _splice(source, start, end, replacement)


@register_function(
    category="text.transforms",
    description="Truncate the right end, then the left end, each with the replacement",
    examples=[
        {"input": ["[[content]]", 2, 2], "output": "content"},
        {"input": ["abcdefgh", 2, 3], "kwargs": {"replacement": "."}, "output": ".cde."},
    ],
    tags=["truncate", "transform"]
)
@guard_empty()
def truncate_ends(source: str, left_count: int, right_count: int, replacement: str = "") -> Optional[str]:
    """
    Truncate both ends of a string.

    The right side is cut first (``right_count`` follows truncate's sign
    convention), then ``left_count`` characters from the left of the result.
    """
    trimmed = truncate(source, right_count, replacement)
    return truncate(trimmed, -left_count, replacement)
