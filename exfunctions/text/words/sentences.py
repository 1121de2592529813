"""
Function: sentences, sentence_count

Naive sentence splitting on the period character.
"""

from typing import List, Optional

from ...registry import register_function
from ...safety import guard_blank


@register_function(
    category="text.words",
    description="Sentences of the string, split on '.' and trimmed",
    examples=[
        {"input": ["First one. Second one.  Third"], "output": ["First one", "Second one", "Third"]},
        {"input": ["No period"], "output": ["No period"]},
    ],
    tags=["sentences", "tokenize"]
)
@guard_blank()
def sentences(source: str) -> Optional[List[str]]:
    """
    Get the list of sentences in the string.

    Every '.' is treated as a delimiter, so abbreviations, decimals and URLs
    split too. Empty pieces are dropped before trimming.
    """
    return [piece.strip() for piece in source.split('.') if piece]


@register_function(
    category="text.words",
    description="Number of sentences in the string",
    examples=[
        {"input": ["One. Two. Three."], "output": 3},
        {"input": [""], "output": 0},
        {"input": ["  \t "], "output": 0},
    ],
    tags=["sentences", "count"]
)
@guard_blank(default=0)
def sentence_count(source: str) -> int:
    """Get the count of sentences in the string."""
    return len(sentences(source))
