"""
Function: consonants, consonant_count

Note: these match every ASCII letter, vowels included. For strict
consonants, combine non_vowels with a letter filter.
"""

from typing import List, Optional

from ...registry import register_function
from ...safety import guard_empty
from .classify import matched_characters


@register_function(
    category="text.characters",
    description="ASCII letters in the string (vowels included)",
    examples=[
        {"input": ["ab1"], "output": ["a", "b"]},
        {"input": ["abab"], "kwargs": {"unique": True}, "output": ["a", "b"]},
        {"input": ["123"], "output": None},
    ],
    tags=["characters", "consonants", "letters"]
)
@guard_empty()
def consonants(source: str, unique: bool = False) -> Optional[List[str]]:
    """
    Get all the "consonants" in a string.

    Returns:
        List of letters, or None when the string is empty or has no letters
    """
    letters = matched_characters(source, "char.letter", unique)
    return letters or None


@register_function(
    category="text.characters",
    description="Number of ASCII letters in the string (vowels included)",
    examples=[
        {"input": ["Hello, World"], "output": 10},
        {"input": ["123"], "output": 0},
    ],
    tags=["characters", "consonants", "count"]
)
@guard_empty(default=0)
def consonant_count(source: str, unique: bool = False) -> int:
    return len(consonants(source, unique) or [])
