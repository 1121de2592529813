"""
Function: nth_word

Positional word lookup.
"""

from typing import Optional

from ...registry import register_function
from ...safety import guard_blank
from .tokens import words


@register_function(
    category="text.words",
    description="The nth word (1-based); past the end gives the last word or None",
    examples=[
        {"input": ["one two three", 2], "output": "two"},
        {"input": ["one two three", -3], "output": "three"},
        {"input": ["one two three", 10], "output": "three"},
        {"input": ["one two three", 10], "kwargs": {"last_if_out_of_range": False}, "output": None},
        {"input": ["a b a c", 3], "kwargs": {"unique": True}, "output": "c"},
    ],
    tags=["words", "index"]
)
@guard_blank()
def nth_word(
    source: str,
    n: int,
    last_if_out_of_range: bool = True,
    unique: bool = False,
) -> Optional[str]:
    """
    Get the nth word in a string.

    Args:
        source: The source string
        n: 1-based position; the sign is ignored and 0 yields None
        last_if_out_of_range: Return the last word when n exceeds the count
        unique: Count only the first occurrence of each word

    Returns:
        The word, or None
    """
    if n == 0:
        return None

    n = abs(n)
    tokens = words(source, unique)
    if not tokens:
        return None

    if n > len(tokens):
        return tokens[-1] if last_if_out_of_range else None

    return tokens[n - 1]
