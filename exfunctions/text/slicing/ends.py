"""
Function: left, right

Characters from either end of a string, by count.
"""

from typing import Optional

from ...registry import register_function
from ...safety import guard_none


@register_function(
    category="text.slicing",
    description="First n characters; negative n takes from the right instead",
    examples=[
        {"input": ["This is a sample string", 4], "output": "This"},
        {"input": ["This is a sample string", -4], "output": "ring"},
        {"input": ["This is a sample string", 0], "output": ""},
        {"input": ["This is a sample string", 1000], "output": "This is a sample string"},
    ],
    tags=["slice", "left"]
)
@guard_none()
def left(source: str, n: int) -> Optional[str]:
    """
    Get the specified number of characters from the left of a string.

    Args:
        source: The source string
        n: Number of characters; a negative value reads from the right

    Returns:
        The extracted characters, or None for a None source
    """
    if n < 0:
        return right(source, abs(n))

    if n == 0:
        return ""

    return source if n >= len(source) else source[:n]


@register_function(
    category="text.slicing",
    description="Last n characters; negative n takes from the left instead",
    examples=[
        {"input": ["This is a sample string", 6], "output": "string"},
        {"input": ["This is a sample string", -4], "output": "This"},
        {"input": ["abc", 0], "output": ""},
        {"input": ["abc", 10], "output": "abc"},
    ],
    tags=["slice", "right"]
)
@guard_none()
def right(source: str, n: int) -> Optional[str]:
    """
    Get the specified number of characters from the right of a string.

    Args:
        source: The source string
        n: Number of characters; a negative value reads from the left

    Returns:
        The extracted characters, or None for a None source
    """
    if n < 0:
        return left(source, abs(n))

    if n == 0:
        return ""

    return source if n >= len(source) else source[len(source) - n:]
