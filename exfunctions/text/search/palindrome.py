"""
Function: is_palindrome
"""

from ...registry import register_function
from ...safety import guard_empty
from ..transforms import reverse


@register_function(
    category="text.search",
    description="Whether the string reads the same reversed, ignoring case",
    examples=[
        {"input": ["Racecar"], "output": True},
        {"input": ["Race car"], "output": False},
        {"input": [""], "output": False},
    ],
    tags=["palindrome", "predicate"]
)
@guard_empty(default=False)
def is_palindrome(source: str) -> bool:
    """Tell whether the string is a palindrome (case-insensitive)."""
    return source.lower() == reverse(source).lower()
