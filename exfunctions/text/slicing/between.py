"""
Function: between

Characters between two positions.
"""

from typing import Optional

from ...registry import register_function
from ...safety import guard_none


@register_function(
    category="text.slicing",
    description="Characters between two indices, exclusive unless inclusive=True",
    examples=[
        {"input": ["0123456789", 2, 5], "output": "34"},
        {"input": ["0123456789", 2, 5], "kwargs": {"inclusive": True}, "output": "2345"},
        {"input": ["0123456789", -5, 2], "output": "34"},
        {"input": ["0123456789", 3, 100], "output": "45678"},
        {"input": ["0123456789", 11, 12], "output": ""},
    ],
    tags=["slice", "between", "index"]
)
@guard_none()
def between(source: str, start: int, end: int, inclusive: bool = False) -> Optional[str]:
    """
    Get all the characters between two indices.

    Indices are taken as absolute values and swapped when given in reverse
    order. An end index past the string clamps to the last character.

    Args:
        source: The source string
        start: Extraction start position
        end: Extraction end position
        inclusive: Whether the characters at both positions are included

    Returns:
        The extracted characters, "" when start lies past the end of the
        string, or None for a None source
    """
    start, end = abs(start), abs(end)
    if start > len(source):
        return ""

    if start > end:
        start, end = end, start

    if end > len(source):
        end = len(source) - 1

    return source[start:end + 1] if inclusive else source[start + 1:end]
