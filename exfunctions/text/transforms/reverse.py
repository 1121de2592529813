"""
Function: reverse
"""

from typing import Optional

from ...registry import register_function
from ...safety import guard_empty


@register_function(
    category="text.transforms",
    description="Reverse the characters, or the word order with words=True",
    examples=[
        {"input": ["stressed"], "output": "desserts"},
        {"input": ["one two  three"], "kwargs": {"words": True}, "output": "three  two one"},
        {"input": [""], "output": None},
    ],
    tags=["reverse", "transform"]
)
@guard_empty()
def reverse(source: str, words: bool = False) -> Optional[str]:
    """
    Get the reversed string.

    Args:
        source: The source string
        words: Reverse the order of space-separated words instead, keeping
            each word (and the spacing between them) intact

    Returns:
        The reversed string, or None for an empty source
    """
    if words:
        return " ".join(reversed(source.split(" ")))
    return source[::-1]
