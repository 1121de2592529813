"""
Function: digits, digit_count
"""

from typing import List, Optional

from ...registry import register_function
from ...safety import guard_empty
from .classify import matched_characters


@register_function(
    category="text.characters",
    description="Digit values found in the string",
    examples=[
        {"input": ["R2-D2 and C-3PO"], "output": [2, 2, 3]},
        {"input": ["R2-D2 and C-3PO"], "kwargs": {"unique": True}, "output": [2, 3]},
        {"input": ["no digits"], "output": None},
    ],
    tags=["characters", "digits"]
)
@guard_empty()
def digits(source: str, unique: bool = False) -> Optional[List[int]]:
    """
    Get the digits in the string as integers.

    Returns:
        List of digit values, or None when there are none
    """
    found = [int(d) for d in matched_characters(source, "char.digit", unique)]
    return found or None


@register_function(
    category="text.characters",
    description="Number of digits in the string",
    examples=[
        {"input": ["R2-D2 and C-3PO"], "output": 3},
        {"input": ["no digits"], "output": 0},
    ],
    tags=["characters", "digits", "count"]
)
@guard_empty(default=0)
def digit_count(source: str, unique: bool = False) -> int:
    return len(digits(source, unique) or [])
