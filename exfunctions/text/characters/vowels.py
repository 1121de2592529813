"""
Function: vowels, vowel_count, non_vowels, non_vowel_count
"""

from typing import List, Optional

from ...registry import register_function
from ...safety import guard_empty
from .classify import matched_characters


@register_function(
    category="text.characters",
    description="ASCII vowels in the string, in order",
    examples=[
        {"input": ["Education"], "output": ["E", "u", "a", "i", "o"]},
        {"input": ["banana"], "kwargs": {"unique": True}, "output": ["a"]},
        {"input": ["rhythm"], "output": []},
    ],
    tags=["characters", "vowels"]
)
@guard_empty()
def vowels(source: str, unique: bool = False) -> Optional[List[str]]:
    """
    Get all the vowels in a string.

    Returns:
        List of vowel characters ([] when there are none), or None for an
        empty source
    """
    return matched_characters(source, "char.vowel", unique)


@register_function(
    category="text.characters",
    description="Number of ASCII vowels in the string",
    examples=[
        {"input": ["banana"], "output": 3},
        {"input": ["banana"], "kwargs": {"unique": True}, "output": 1},
    ],
    tags=["characters", "vowels", "count"]
)
@guard_empty(default=0)
def vowel_count(source: str, unique: bool = False) -> int:
    return len(vowels(source, unique))


@register_function(
    category="text.characters",
    description="Every character that is not an ASCII vowel, whitespace included",
    examples=[
        {"input": ["a b"], "output": [" ", "b"]},
        {"input": ["bob"], "kwargs": {"unique": True}, "output": ["b"]},
    ],
    tags=["characters", "vowels"]
)
@guard_empty()
def non_vowels(source: str, unique: bool = False) -> Optional[List[str]]:
    """Get all the characters of a string that are not vowels."""
    return matched_characters(source, "char.non_vowel", unique)


@register_function(
    category="text.characters",
    description="Number of characters that are not ASCII vowels",
    examples=[
        {"input": ["a b"], "output": 2},
    ],
    tags=["characters", "vowels", "count"]
)
@guard_empty(default=0)
def non_vowel_count(source: str, unique: bool = False) -> int:
    return len(non_vowels(source, unique))
