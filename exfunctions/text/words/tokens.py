"""
Function: words, word_count

Whitespace tokenization.
"""

from typing import Iterable, List, Optional

from ...registry import register_function
from ...safety import guard_blank


def unique_in_order(items: Iterable) -> List:
    """Drop repeats, keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


@register_function(
    category="text.words",
    description="Words of the string, split on whitespace",
    examples=[
        {"input": ["to be  or not to be"], "output": ["to", "be", "or", "not", "to", "be"]},
        {"input": ["to be or not to be"], "kwargs": {"unique": True},
         "output": ["to", "be", "or", "not"]},
        {"input": [""], "output": None},
        {"input": ["   "], "output": None},
    ],
    tags=["words", "tokenize"]
)
@guard_blank()
def words(source: str, unique: bool = False) -> Optional[List[str]]:
    """
    Get the list of words in the string.

    Args:
        source: The source string
        unique: Keep only the first occurrence of each word

    Returns:
        List of words, or None for an empty or whitespace-only source
    """
    tokens = source.split()
    return unique_in_order(tokens) if unique else tokens


@register_function(
    category="text.words",
    description="Number of words in the string",
    examples=[
        {"input": ["to be or not to be"], "output": 6},
        {"input": ["to be or not to be"], "kwargs": {"unique": True}, "output": 4},
        {"input": [None], "output": 0},
    ],
    tags=["words", "count"]
)
@guard_blank(default=0)
def word_count(source: str, unique: bool = False) -> int:
    """Get the number of words in the string."""
    return len(words(source, unique))
