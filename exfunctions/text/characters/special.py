"""
Function: special_characters, special_character_count
"""

from typing import List, Optional

from ...registry import register_function
from ...safety import guard_empty
from .classify import matched_characters


@register_function(
    category="text.characters",
    description="Characters that are neither ASCII letters nor digits",
    examples=[
        {"input": ["a-b c!"], "output": ["-", " ", "!"]},
        {"input": ["a--b"], "kwargs": {"unique": True}, "output": ["-"]},
        {"input": ["abc123"], "output": []},
    ],
    tags=["characters", "special"]
)
@guard_empty()
def special_characters(source: str, unique: bool = False) -> Optional[List[str]]:
    """Get the special characters in the string."""
    return matched_characters(source, "char.special", unique)


@register_function(
    category="text.characters",
    description="Number of characters that are neither ASCII letters nor digits",
    examples=[
        {"input": ["a-b c!"], "output": 3},
    ],
    tags=["characters", "special", "count"]
)
@guard_empty(default=0)
def special_character_count(source: str, unique: bool = False) -> int:
    return len(special_characters(source, unique))
